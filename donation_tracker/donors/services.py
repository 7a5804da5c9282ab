"""
Donor Services

Query and mutation logic for donors and their donations. Routes parse the
request; everything that touches the database lives here.
"""

import logging

from sqlalchemy import func
from sqlalchemy.orm import selectinload
from sqlalchemy.orm.exc import StaleDataError

from donation_tracker.errors import ConflictError, NotFoundError, ValidationError
from donation_tracker.extensions import db
from donation_tracker.models import Donation, Donor
from donation_tracker.utils import parse_number

logger = logging.getLogger(__name__)

SORTABLE_FIELDS = ('id', 'name', 'address', 'city', 'totalDonation')


def _escape_like(value):
    return value.replace('\\', '\\\\').replace('%', '\\%').replace('_', '\\_')


def _total_donation():
    return func.coalesce(func.sum(Donation.amount), 0.0)


def list_donors(name=None, city=None, min_total=None, max_total=None,
                sort_by=None, sort_order=None):
    """
    Return ``(donor, total_donation)`` pairs matching the filters.

    Args:
        name: case-insensitive substring of the donor name
        city: case-insensitive substring of the city
        min_total: inclusive lower bound on the summed donation amount
        max_total: inclusive upper bound on the summed donation amount
        sort_by: one of SORTABLE_FIELDS; storage order when omitted
        sort_order: 'desc' for descending, anything else ascending

    Raises:
        ValidationError: a bound is not a number or ``sort_by`` is unknown
    """
    total = _total_donation()
    query = (db.session.query(Donor, total.label('totalDonation'))
             .outerjoin(Donation, Donation.donor_id == Donor.id)
             .group_by(Donor.id)
             .options(selectinload(Donor.donations)))

    if name:
        query = query.filter(Donor.name.ilike(f'%{_escape_like(name)}%', escape='\\'))
    if city:
        query = query.filter(Donor.city.ilike(f'%{_escape_like(city)}%', escape='\\'))

    if min_total not in (None, ''):
        query = query.having(total >= parse_number(min_total, 'minTotal'))
    if max_total not in (None, ''):
        query = query.having(total <= parse_number(max_total, 'maxTotal'))

    if sort_by:
        if sort_by not in SORTABLE_FIELDS:
            raise ValidationError(
                f'Cannot sort by "{sort_by}". Allowed: {", ".join(SORTABLE_FIELDS)}',
                field='sortBy')
        column = total if sort_by == 'totalDonation' else getattr(Donor, sort_by)
        column = column.desc() if sort_order == 'desc' else column.asc()
        query = query.order_by(column, Donor.id)
    else:
        query = query.order_by(Donor.id)

    return [(donor, float(total_donation)) for donor, total_donation in query.all()]


def get_donor(donor_id):
    donor = db.session.get(Donor, donor_id)
    if donor is None:
        raise NotFoundError('Donor')
    return donor


def create_donor(name, address=None, city=None):
    """Create a donor with no donations."""
    if not name:
        raise ValidationError('Donor name is required.', field='name')
    donor = Donor(name=name, address=address, city=city)
    db.session.add(donor)
    db.session.commit()
    logger.info('Created donor %s (%s)', donor.id, name)
    return donor


def _commit_donor(donor):
    """Commit a donor mutation, turning a lost optimistic-lock race into a conflict."""
    try:
        db.session.commit()
    except StaleDataError:
        db.session.rollback()
        logger.warning('Concurrent modification of donor %s', donor.id)
        raise ConflictError('Donor was modified by another request. Please retry.')


def delete_donor(donor_id):
    """Delete a donor together with all of its donations."""
    donor = get_donor(donor_id)
    db.session.delete(donor)
    _commit_donor(donor)
    logger.info('Deleted donor %s', donor_id)


def add_donation(donor_id, amount, date):
    """Append a donation to the donor and return the donor."""
    donor = get_donor(donor_id)
    amount = parse_number(amount, 'amount')
    if not isinstance(date, str) or not date.strip():
        raise ValidationError('Field "date" is required.', field='date')

    donor.donations.append(Donation(amount=amount, date=date.strip()))
    donor.touch()
    _commit_donor(donor)
    logger.info('Added donation of %s to donor %s', amount, donor_id)
    return donor


def _find_donation(donor, donation_id):
    for donation in donor.donations:
        if donation.id == donation_id:
            return donation
    return None


def update_donation(donor_id, donation_id, amount=None, date=None):
    """Update the supplied fields of one donation; absent fields are kept."""
    donor = get_donor(donor_id)
    donation = _find_donation(donor, donation_id)
    if donation is None:
        raise NotFoundError('Donation')

    if amount is not None:
        amount = parse_number(amount, 'amount')
    if date is not None:
        if not isinstance(date, str) or not date.strip():
            raise ValidationError('Field "date" must be a non-empty string.', field='date')
        date = date.strip()

    if amount is not None:
        donation.amount = amount
    if date is not None:
        donation.date = date
    donor.touch()
    _commit_donor(donor)
    logger.info('Updated donation %s of donor %s', donation_id, donor_id)
    return donor


def remove_donation(donor_id, donation_id):
    """Remove a donation from the donor; an unknown donation id is a no-op."""
    donor = get_donor(donor_id)
    donation = _find_donation(donor, donation_id)
    if donation is not None:
        donor.donations.remove(donation)
        donor.touch()
        _commit_donor(donor)
        logger.info('Removed donation %s from donor %s', donation_id, donor_id)
    return donor
