from datetime import datetime, timedelta
from functools import wraps

import jwt
from flask import current_app, g, request

from errors import AuthError, Forbidden
from extensions import db
from models import User


# --- Auth Helpers ---
def generate_token(user):
    secret_key = current_app.config['SECRET_KEY']
    payload = {
        'sub': str(user.id),
        'role': user.role,
        'exp': datetime.utcnow() + timedelta(hours=current_app.config['TOKEN_TTL_HOURS'])
    }
    return jwt.encode(payload, secret_key, algorithm='HS256')


def verify_token(token):
    """Return the user id carried by a valid token, or None."""
    secret_key = current_app.config['SECRET_KEY']
    try:
        payload = jwt.decode(token, secret_key, algorithms=['HS256'])
        return int(payload['sub'])
    except (jwt.InvalidTokenError, KeyError, ValueError):
        return None


def _bearer_token():
    auth_header = request.headers.get('Authorization', '')
    if not auth_header.startswith('Bearer '):
        return None
    return auth_header.split(' ', 1)[1].strip() or None


def current_user(optional=False):
    """Resolve the user behind the request's bearer token.

    With ``optional=True`` a missing, expired or unknown token yields None
    so the caller is treated as anonymous.
    """
    if 'current_user' in g:
        return g.current_user
    token = _bearer_token()
    user_id = verify_token(token) if token else None
    user = db.session.get(User, user_id) if user_id else None
    if user is None:
        if optional:
            return None
        if token is None:
            raise AuthError('Missing or invalid token')
        raise AuthError('Invalid or expired token')
    g.current_user = user
    return user


def token_required(f):
    @wraps(f)
    def decorated(*args, **kwargs):
        current_user()
        return f(*args, **kwargs)
    return decorated


def admin_required(f):
    @wraps(f)
    def decorated(*args, **kwargs):
        # Role is re-read from the database, not trusted from the token
        if not current_user().is_admin:
            raise Forbidden('Access Denied. Not an administrator.')
        return f(*args, **kwargs)
    return decorated


def ensure_owner(owner_id):
    user = current_user()
    if user.is_admin or user.id == owner_id:
        return user
    raise Forbidden('You can only modify your own profile data.')
