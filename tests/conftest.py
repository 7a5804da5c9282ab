import pytest

from donation_tracker import create_app
from donation_tracker.auth.services import hash_password
from donation_tracker.config import TestConfig
from donation_tracker.extensions import db
from donation_tracker.models import Account, Donation, Donor


@pytest.fixture()
def app():
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def make_account(app):
    """Insert an account directly and return its id."""
    def _make(username, password='secret', role='staff'):
        with app.app_context():
            account = Account(username=username, role=role,
                              password=hash_password(password, app.config['BCRYPT_ROUNDS']))
            db.session.add(account)
            db.session.commit()
            return account.id
    return _make


@pytest.fixture()
def make_donor(app):
    """Insert a donor with donations given as (amount, date) pairs and return its id."""
    def _make(name, city='Lyon', address='1 Rue Test', donations=()):
        with app.app_context():
            donor = Donor(name=name, city=city, address=address)
            for amount, date in donations:
                donor.donations.append(Donation(amount=amount, date=date))
            db.session.add(donor)
            db.session.commit()
            return donor.id
    return _make


@pytest.fixture()
def login(client):
    def _login(username, password='secret'):
        return client.post('/api/login', json={'username': username, 'password': password})
    return _login


@pytest.fixture()
def admin_client(client, make_account, login):
    make_account('admin', role='admin')
    r = login('admin')
    assert r.status_code == 200
    return client


@pytest.fixture()
def staff_client(client, make_account, login):
    make_account('staff', role='staff')
    r = login('staff')
    assert r.status_code == 200
    return client
