"""
Donor and Donation Models
"""

from datetime import datetime, timezone

from donation_tracker.extensions import db


def _utcnow():
    return datetime.now(timezone.utc)


class Donor(db.Model):
    """Donor record owning an ordered list of donations.

    ``version`` is the optimistic-lock counter: SQLAlchemy adds it to the
    WHERE clause of every UPDATE/DELETE on the row and raises
    ``StaleDataError`` when another writer got there first.
    """
    __tablename__ = 'donors'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    address = db.Column(db.String(255))
    city = db.Column(db.String(100))
    version = db.Column(db.Integer, nullable=False)
    updated_at = db.Column(db.DateTime, default=_utcnow)

    donations = db.relationship('Donation', backref='donor', lazy=True,
                                order_by='Donation.id',
                                cascade='all, delete-orphan')

    __mapper_args__ = {'version_id_col': version}

    def touch(self):
        """Mark the donor row dirty so the version check runs on commit."""
        self.updated_at = _utcnow()

    def to_dict(self, total_donation=None):
        data = {
            'id': self.id,
            'name': self.name,
            'address': self.address,
            'city': self.city,
            'version': self.version,
            'donations': [d.to_dict() for d in self.donations],
        }
        if total_donation is not None:
            data['totalDonation'] = total_donation
        return data

    def __repr__(self):
        return f'<Donor {self.name}>'


class Donation(db.Model):
    """Single donation line-item"""
    __tablename__ = 'donations'

    id = db.Column(db.Integer, primary_key=True)
    donor_id = db.Column(db.Integer, db.ForeignKey('donors.id'), nullable=False, index=True)
    amount = db.Column(db.Float, nullable=False)
    date = db.Column(db.String(40), nullable=False)

    def to_dict(self):
        return {'id': self.id, 'amount': self.amount, 'date': self.date}

    def __repr__(self):
        return f'<Donation Donor:{self.donor_id} Amount:{self.amount}>'
