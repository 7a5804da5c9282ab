from donation_tracker import create_app
from donation_tracker.config import TestConfig


def test_index_serves_entry_page(client):
    r = client.get('/')
    assert r.status_code == 200
    assert 'Donation Tracker' in r.get_data(as_text=True)


def test_unknown_route_is_json(client):
    r = client.get('/api/nothing-here')
    assert r.status_code == 404
    assert r.get_json()['success'] is False


def test_wrong_method_is_json(client):
    r = client.get('/api/login')
    assert r.status_code == 405
    assert r.get_json()['success'] is False


def test_unexpected_error_is_generic_500(client, monkeypatch, make_account, login):
    make_account('alice')
    login('alice')

    def boom(**kwargs):
        raise RuntimeError('database is on fire')

    monkeypatch.setattr('donation_tracker.donors.services.list_donors', boom)
    r = client.get('/api/donors')
    assert r.status_code == 500
    assert r.get_json() == {'success': False, 'message': 'Server error'}


def test_config_is_injected():
    class CustomConfig(TestConfig):
        BCRYPT_ROUNDS = 5

    app = create_app(CustomConfig)
    assert app.config['BCRYPT_ROUNDS'] == 5
    assert app.testing
