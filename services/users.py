"""User accounts: signup, credential checks, profile updates and admin
housekeeping."""
import logging

from sqlalchemy.exc import IntegrityError
from werkzeug.security import check_password_hash, generate_password_hash

from errors import AuthError, Conflict, NotFound, ValidationError
from extensions import db
from models import ROLE_ADMIN, ROLE_USER, User
from services import storage

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = 'Invalid email or password.'

# Compared against when the email is unknown so both failure paths cost one hash
_DUMMY_HASH = generate_password_hash('not-a-real-password')

# Form field -> column for the text part of a profile update
PROFILE_TEXT_FIELDS = {
    'name': 'username',
    'about': 'about',
    'title': 'user_title',
    'heroDescription': 'hero_description',
    'contactEmail': 'contact_email',
}

# Form field -> column for the file part of a profile update
PROFILE_FILE_FIELDS = {
    'profilePicture': 'profile_picture_path',
    'resumePdf': 'resume_path',
}


def normalize_email(email):
    return (email or '').strip().lower()


def find_by_email(email):
    return User.query.filter_by(email=normalize_email(email)).first()


def get_user(user_id):
    user = db.session.get(User, user_id)
    if user is None:
        raise NotFound(f'User with ID {user_id} not found.')
    return user


def create_user(name, email, password, about=None, hero_description=None, title=None):
    email = normalize_email(email)
    if find_by_email(email):
        raise Conflict('This email address is already registered.')
    user = User(
        username=name,
        email=email,
        password_hash=generate_password_hash(password),
        about=about,
        hero_description=hero_description,
        user_title=title,
        role=ROLE_USER
    )
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise Conflict('This email address is already registered.')
    logger.info('Created user %s (id=%s)', user.email, user.id)
    return user


def verify_password(plain, digest):
    return check_password_hash(digest, plain)


def authenticate(email, password):
    user = find_by_email(email)
    if user is None:
        verify_password(password, _DUMMY_HASH)
        raise AuthError(INVALID_CREDENTIALS)
    if not verify_password(password, user.password_hash):
        raise AuthError(INVALID_CREDENTIALS)
    return user


def check_profile_fields(fields):
    for field_name, value in fields.items():
        if value is not None and not isinstance(value, str):
            raise ValidationError(f'{field_name} must be a string.')
    if 'name' in fields and not (fields['name'] or '').strip():
        raise ValidationError('Name cannot be empty.')


def update_profile(user, fields, files):
    """Apply text fields and uploaded files to ``user`` in one commit.

    ``fields`` maps form names (see PROFILE_TEXT_FIELDS) to new values; keys
    that are absent leave the column alone. ``files`` maps upload field names
    to FileStorage objects. Every upload runs before any column is touched,
    so a failed upload leaves the row exactly as it was.
    """
    check_profile_fields(fields)

    urls = {}
    for field_name, column in PROFILE_FILE_FIELDS.items():
        file = files.get(field_name)
        if file is not None:
            urls[column] = storage.store(field_name, file)

    try:
        for field_name, column in PROFILE_TEXT_FIELDS.items():
            if field_name in fields:
                setattr(user, column, fields[field_name])
        for column, url in urls.items():
            setattr(user, column, url)
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    db.session.refresh(user)
    return user


def delete_user(user_id):
    user = db.session.get(User, user_id)
    if user is None:
        return False
    db.session.delete(user)
    db.session.commit()
    logger.info('Deleted user id=%s', user_id)
    return True


def list_users(role=ROLE_USER):
    return User.query.filter_by(role=role).order_by(User.id).all()


def promote_to_admin(email):
    user = find_by_email(email)
    if user is None:
        raise NotFound(f'No user registered with {email}.')
    user.role = ROLE_ADMIN
    db.session.commit()
    return user
