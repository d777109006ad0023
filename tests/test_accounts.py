from extensions import db
from models import User

SIGNUP = {
    'name': 'Bob',
    'email': 'bob@x.com',
    'password': 'pw123',
    'about': 'I build things',
    'heroDescription': 'Full-stack developer',
    'skills': 'Python, Flask',
}


def user_count(app):
    with app.app_context():
        return db.session.query(User).count()


def test_signup_creates_user_with_user_role(app, client):
    res = client.post('/signup', json=SIGNUP)
    assert res.status_code == 201
    assert 'message' in res.get_json()
    with app.app_context():
        user = User.query.filter_by(email='bob@x.com').one()
        assert user.role == 'user'
        assert user.user_title == 'Python, Flask'
        assert user.password_hash != 'pw123'


def test_signup_accepts_form_body(client):
    res = client.post('/signup', data=SIGNUP)
    assert res.status_code == 201


def test_signup_missing_fields(app, client):
    body = dict(SIGNUP)
    del body['about']
    res = client.post('/signup', json=body)
    assert res.status_code == 400
    assert res.get_json()['message'] == 'All fields are required.'
    assert user_count(app) == 0


def test_signup_duplicate_email_conflicts(app, client):
    assert client.post('/signup', json=SIGNUP).status_code == 201
    res = client.post('/signup', json=dict(SIGNUP, email='BOB@x.com', name='Other'))
    assert res.status_code == 409
    assert res.get_json()['message'] == 'This email address is already registered.'
    assert user_count(app) == 1


def test_login_wrong_password_then_correct(client, make_user):
    make_user('bob@x.com', 'pw123')

    res = client.post('/login', json={'email': 'bob@x.com', 'password': 'wrong'})
    assert res.status_code == 401

    res = client.post('/login', json={'email': 'bob@x.com', 'password': 'pw123'})
    assert res.status_code == 200
    body = res.get_json()
    assert body['user']['role'] == 'user'
    assert body['user']['name'] == 'Bob'
    assert body['redirectUrl'] == 'index.html'
    assert body['token']
    assert 'password' not in body['user']
    assert 'password_hash' not in body['user']


def test_login_does_not_reveal_unknown_email(client, make_user):
    make_user('bob@x.com', 'pw123')
    wrong_pw = client.post('/login', json={'email': 'bob@x.com', 'password': 'nope'})
    unknown = client.post('/login', json={'email': 'ghost@x.com', 'password': 'nope'})
    assert wrong_pw.status_code == unknown.status_code == 401
    assert wrong_pw.get_json() == unknown.get_json()


def test_login_requires_both_fields(client):
    res = client.post('/login', json={'email': 'bob@x.com'})
    assert res.status_code == 400


def test_admin_login_rejects_regular_user(client, make_user):
    make_user('bob@x.com', 'pw123')
    res = client.post('/admin/login', json={'email': 'bob@x.com', 'password': 'pw123'})
    assert res.status_code == 403


def test_admin_login_bad_password(client, make_user):
    make_user('admin@x.com', 'adminpw', role='admin')
    res = client.post('/admin/login', json={'email': 'admin@x.com', 'password': 'bad'})
    assert res.status_code == 401


def test_admin_login_success(client, make_user):
    make_user('admin@x.com', 'adminpw', name='Admin', role='admin')
    res = client.post('/admin/login', json={'email': 'admin@x.com', 'password': 'adminpw'})
    assert res.status_code == 200
    body = res.get_json()
    assert body['user'] == {'name': 'Admin', 'email': 'admin@x.com', 'role': 'admin'}
    assert body['redirectUrl'] == 'admin-dashboard.html'


def test_promote_admin_cli(app, make_user):
    make_user('bob@x.com', 'pw123')
    result = app.test_cli_runner().invoke(args=['promote-admin', 'bob@x.com'])
    assert result.exit_code == 0
    assert 'administrator' in result.output
    with app.app_context():
        assert User.query.filter_by(email='bob@x.com').one().role == 'admin'


def test_promote_admin_cli_unknown_email(app):
    result = app.test_cli_runner().invoke(args=['promote-admin', 'ghost@x.com'])
    assert result.exit_code != 0
