from donation_tracker.extensions import db
from donation_tracker.models import Account


def test_login_returns_session_user(client, make_account, login):
    account_id = make_account('alice', password='pw123', role='admin')

    r = login('alice', 'pw123')
    assert r.status_code == 200
    data = r.get_json()
    assert data['success'] is True
    assert data['user'] == {'id': account_id, 'username': 'alice', 'role': 'admin'}
    assert 'password' not in data['user']


def test_login_trims_username(client, make_account, login):
    make_account('alice', password='pw123')
    r = login('  alice  ', 'pw123')
    assert r.status_code == 200


def test_login_rejects_bad_credentials(client, make_account, login):
    make_account('alice', password='pw123')

    r = login('alice', 'wrong')
    assert r.status_code == 401
    assert r.get_json() == {'success': False, 'message': 'Invalid credentials'}

    r = login('nobody', 'pw123')
    assert r.status_code == 401


def test_login_requires_both_fields(client):
    r = client.post('/api/login', json={'username': 'alice'})
    assert r.status_code == 400
    assert r.get_json()['success'] is False


def test_login_accepts_form_data(client, make_account):
    make_account('alice', password='pw123')
    r = client.post('/api/login', data={'username': 'alice', 'password': 'pw123'})
    assert r.status_code == 200
    assert r.get_json()['user']['username'] == 'alice'


def test_logout_revokes_access(client, make_account, login):
    make_account('alice')
    login('alice')
    assert client.get('/api/donors').status_code == 200

    r = client.post('/api/logout')
    assert r.status_code == 200
    assert r.get_json() == {'success': True, 'message': 'Logged out'}

    r = client.get('/api/donors')
    assert r.status_code == 401
    assert r.get_json() == {'success': False, 'message': 'Unauthorized. Please log in.'}


def test_logout_without_session_succeeds(client):
    r = client.post('/api/logout')
    assert r.status_code == 200
    assert r.get_json()['success'] is True


def test_register_requires_admin_session(client):
    r = client.post('/api/register', json={'role': 'staff', 'username': 'bob', 'password': 'pw'})
    assert r.status_code == 403
    assert r.get_json()['message'] == 'Only admin can create accounts.'


def test_register_rejects_non_admin(staff_client):
    r = staff_client.post('/api/register', json={'role': 'staff', 'username': 'bob', 'password': 'pw'})
    assert r.status_code == 403


def test_register_creates_hashed_account(app, admin_client, login):
    r = admin_client.post('/api/register', json={'role': 'staff', 'username': 'bob', 'password': 'pw'})
    assert r.status_code == 201
    data = r.get_json()
    assert data == {'success': True, 'message': 'Account created successfully.'}

    with app.app_context():
        account = Account.query.filter_by(username='bob').one()
        assert account.role == 'staff'
        assert account.password != 'pw'
        assert account.password.startswith('$2')

    admin_client.post('/api/logout')
    r = login('bob', 'pw')
    assert r.status_code == 200
    assert r.get_json()['user']['role'] == 'staff'


def test_register_missing_field(admin_client):
    r = admin_client.post('/api/register', json={'role': 'staff', 'username': 'bob'})
    assert r.status_code == 400
    assert r.get_json() == {'success': False, 'message': 'All fields are required.'}


def test_register_duplicate_username_is_conflict(app, admin_client):
    payload = {'role': 'staff', 'username': 'bob', 'password': 'pw'}
    assert admin_client.post('/api/register', json=payload).status_code == 201

    with app.app_context():
        before = db.session.query(Account).count()

    r = admin_client.post('/api/register', json=dict(payload, password='other'))
    assert r.status_code == 409
    assert r.get_json()['message'] == 'Username already exists.'

    with app.app_context():
        assert db.session.query(Account).count() == before


def test_logout_invalidates_previously_issued_cookie(app, make_account, login, client):
    make_account('alice')
    login('alice')
    cookie = client.get_cookie('session')
    assert cookie is not None

    assert client.post('/api/logout').status_code == 200

    other = app.test_client()
    other.set_cookie('session', cookie.value)
    r = other.get('/api/donors')
    assert r.status_code == 401


def test_login_after_logout_starts_new_session(app, make_account, login, client):
    make_account('alice')
    login('alice')
    with app.app_context():
        first_token = Account.query.filter_by(username='alice').one().session_token

    client.post('/api/logout')
    assert login('alice').status_code == 200
    assert client.get('/api/donors').status_code == 200
    with app.app_context():
        assert Account.query.filter_by(username='alice').one().session_token != first_token
