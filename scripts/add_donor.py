"""Create a donor record. Donors have no HTTP create endpoint."""
import argparse
import os
import sys

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv  # noqa: E402

from donation_tracker import create_app  # noqa: E402
from donation_tracker.donors.services import create_donor  # noqa: E402


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument('name')
    parser.add_argument('address', nargs='?')
    parser.add_argument('city', nargs='?')
    args = parser.parse_args()

    load_dotenv()
    app = create_app()

    with app.app_context():
        donor = create_donor(args.name, address=args.address, city=args.city)
        print(f"Created donor {donor.id}: {donor.name}")


if __name__ == '__main__':
    main()
