from datetime import datetime, timedelta

import jwt

from extensions import db
from models import Feedback
from services import users


def test_feedback_end_to_end(app, client, admin_headers):
    res = client.post('/feedback', json={'userEmail': 'a@b.com', 'message': 'hi'})
    assert res.status_code == 201

    listing = client.get('/admin/feedback', headers=admin_headers).get_json()
    assert len(listing) == 1
    assert listing[0]['user_email'] == 'a@b.com'
    assert listing[0]['message'] == 'hi'
    assert listing[0]['submitted_at']
    assert app.extensions['mailer'].sent == [('a@b.com', 'hi')]


def test_feedback_requires_both_fields(app, client):
    assert client.post('/feedback', json={'userEmail': 'a@b.com'}).status_code == 400
    assert client.post('/feedback', json={'message': 'hi'}).status_code == 400
    assert client.post('/feedback', json={'userEmail': ' ', 'message': 'hi'}).status_code == 400
    with app.app_context():
        assert db.session.query(Feedback).count() == 0


def test_mail_failure_does_not_fail_submission(app, client):
    app.extensions['mailer'].fail = True
    res = client.post('/feedback', json={'userEmail': 'a@b.com', 'message': 'hi'})
    assert res.status_code == 201
    with app.app_context():
        assert db.session.query(Feedback).count() == 1


def test_feedback_from_logged_in_user_is_linked(app, client, make_user, login):
    bob_id = make_user()
    res = client.post('/feedback', headers=login(),
                      json={'userEmail': 'bob@x.com', 'message': 'nice'})
    assert res.status_code == 201
    with app.app_context():
        assert Feedback.query.one().user_id == bob_id


def test_same_second_submissions_list_newest_first(client, admin_headers):
    for i in range(3):
        client.post('/feedback', json={'userEmail': f'u{i}@x.com', 'message': str(i)})
    listing = client.get('/admin/feedback', headers=admin_headers).get_json()
    assert [f['message'] for f in listing] == ['2', '1', '0']


def expired_token(app, user_id):
    payload = {'sub': str(user_id), 'role': 'user',
               'exp': datetime.utcnow() - timedelta(hours=1)}
    return jwt.encode(payload, app.config['SECRET_KEY'], algorithm='HS256')


def test_expired_token_submits_anonymously(app, client, make_user):
    bob_id = make_user()
    headers = {'Authorization': f'Bearer {expired_token(app, bob_id)}'}
    res = client.post('/feedback', headers=headers,
                      json={'userEmail': 'a@b.com', 'message': 'hi'})
    assert res.status_code == 201
    with app.app_context():
        assert Feedback.query.one().user_id is None


def test_deleted_user_token_submits_anonymously(app, client, make_user, login):
    bob_id = make_user()
    headers = login()
    with app.app_context():
        users.delete_user(bob_id)
    res = client.post('/feedback', headers=headers,
                      json={'userEmail': 'a@b.com', 'message': 'hi'})
    assert res.status_code == 201
    with app.app_context():
        assert Feedback.query.one().user_id is None


def test_bad_token_with_missing_fields_is_validation_error(client):
    res = client.post('/feedback', headers={'Authorization': 'Bearer garbage'},
                      json={'userEmail': 'a@b.com'})
    assert res.status_code == 400


def test_non_object_json_body_rejected(app, client):
    res = client.post('/feedback', json=[1])
    assert res.status_code == 400
    assert res.get_json()['message'] == 'Request body must be a JSON object.'
    with app.app_context():
        assert db.session.query(Feedback).count() == 0
