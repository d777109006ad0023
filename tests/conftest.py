import io

import pytest

from app import create_app
from config import TestConfig
from extensions import db
from models import ROLE_ADMIN
from services import users


class FakeChatClient:
    def __init__(self):
        self.prompts = []
        self.reply = 'Hello from the assistant'
        self.error = None

    def complete(self, prompt):
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return self.reply


class FakeMailer:
    def __init__(self):
        self.sent = []
        self.fail = False

    def notify_feedback(self, user_email, message):
        if self.fail:
            raise RuntimeError('SMTP down')
        self.sent.append((user_email, message))


@pytest.fixture
def app(tmp_path):
    app = create_app(TestConfig)
    app.config['UPLOAD_FOLDER'] = str(tmp_path / 'uploads')
    app.extensions['asset_storage'].folder = app.config['UPLOAD_FOLDER']
    app.extensions['chat_client'] = FakeChatClient()
    app.extensions['mailer'] = FakeMailer()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_user(app):
    def _make_user(email='bob@x.com', password='pw123', name='Bob', role=None, **extra):
        with app.app_context():
            user = users.create_user(name, email, password,
                                     about=extra.get('about', 'About Bob'),
                                     hero_description=extra.get('hero_description', 'Hero'),
                                     title=extra.get('title', 'Developer'))
            if role == ROLE_ADMIN:
                users.promote_to_admin(email)
            return user.id
    return _make_user


@pytest.fixture
def login(client):
    def _login(email='bob@x.com', password='pw123', path='/login'):
        res = client.post(path, json={'email': email, 'password': password})
        assert res.status_code == 200, res.get_json()
        return {'Authorization': f"Bearer {res.get_json()['token']}"}
    return _login


@pytest.fixture
def admin_headers(make_user, login):
    make_user(email='admin@x.com', password='adminpw', name='Admin', role=ROLE_ADMIN)
    return login('admin@x.com', 'adminpw', path='/admin/login')


def fake_file(name='pic.png', content=b'\x89PNG fake image bytes'):
    return (io.BytesIO(content), name)


@pytest.fixture
def upload():
    return fake_file
