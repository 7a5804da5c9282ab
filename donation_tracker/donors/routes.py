"""
Donor Routes

JSON endpoints for listing donors with totals and editing donations.
"""

from flask import jsonify, request

from donation_tracker.donors import donors_bp
from donation_tracker.donors import services
from donation_tracker.utils import request_data


@donors_bp.route('', methods=['GET'])
def list_donors():
    """List donors with their computed totalDonation, filtered and sorted."""
    args = request.args
    results = services.list_donors(
        name=args.get('name'),
        city=args.get('city'),
        min_total=args.get('minTotal'),
        max_total=args.get('maxTotal'),
        sort_by=args.get('sortBy'),
        sort_order=args.get('sortOrder'),
    )
    donors = [donor.to_dict(total_donation=total) for donor, total in results]
    return jsonify(success=True, donors=donors)


@donors_bp.route('/<int:donor_id>', methods=['DELETE'])
def delete_donor(donor_id):
    services.delete_donor(donor_id)
    return jsonify(success=True, message='Donor removed')


@donors_bp.route('/<int:donor_id>/donations', methods=['POST'])
def add_donation(donor_id):
    data = request_data()
    donor = services.add_donation(donor_id, data.get('amount'), data.get('date'))
    return jsonify(success=True, donor=donor.to_dict())


@donors_bp.route('/<int:donor_id>/donations/<int:donation_id>', methods=['PUT'])
def update_donation(donor_id, donation_id):
    """Partial update: only the fields present in the body change."""
    data = request_data()
    donor = services.update_donation(donor_id, donation_id,
                                     amount=data.get('amount'), date=data.get('date'))
    return jsonify(success=True, donor=donor.to_dict())


@donors_bp.route('/<int:donor_id>/donations/<int:donation_id>', methods=['DELETE'])
def remove_donation(donor_id, donation_id):
    donor = services.remove_donation(donor_id, donation_id)
    return jsonify(success=True, donor=donor.to_dict())
