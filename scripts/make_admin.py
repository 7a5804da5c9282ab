"""Create an admin account, or promote an existing one, so registration can begin."""
import argparse
import os
import sys

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv  # noqa: E402

from donation_tracker import create_app  # noqa: E402
from donation_tracker.auth.services import hash_password  # noqa: E402
from donation_tracker.extensions import db  # noqa: E402
from donation_tracker.models import Account  # noqa: E402


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument('username')
    parser.add_argument('password')
    args = parser.parse_args()

    load_dotenv()
    app = create_app()

    with app.app_context():
        admin_role = app.config['ADMIN_ROLE']
        account = Account.query.filter_by(username=args.username).first()

        if not account:
            account = Account(
                username=args.username,
                password=hash_password(args.password, app.config['BCRYPT_ROUNDS']),
                role=admin_role,
            )
            db.session.add(account)
            print("New admin account created")
        else:
            account.role = admin_role
            print("Existing account promoted to admin")

        db.session.commit()


if __name__ == '__main__':
    main()
