from flask import jsonify

from auth import generate_token
from errors import Forbidden, ValidationError
from routes import api_bp
from routes.utils import request_data
from services import users


# --- Signup ---
@api_bp.route('/signup', methods=['POST'])
def signup():
    data = request_data()
    name = data.get('name')
    email = data.get('email')
    password = data.get('password')
    about = data.get('about')
    hero_description = data.get('heroDescription')
    skills = data.get('skills')  # stored as the user's title
    if not all([name, email, password, about, hero_description, skills]):
        raise ValidationError('All fields are required.')
    users.create_user(name, email, password, about=about,
                      hero_description=hero_description, title=skills)
    return jsonify({'message': 'Sign up successfully completed! You can now log in.'}), 201


# --- Login ---
@api_bp.route('/login', methods=['POST'])
def login():
    data = request_data()
    email = data.get('email')
    password = data.get('password')
    if not email or not password:
        raise ValidationError('Email and password are required.')
    user = users.authenticate(email, password)
    return jsonify({
        'message': 'Login successful!',
        'redirectUrl': 'index.html',
        'token': generate_token(user),
        'user': {
            'id': user.id,
            'name': user.username,
            'email': user.email,
            'about': user.about,
            'heroDescription': user.hero_description,
            'title': user.user_title,
            'profilePicture': user.profile_picture_path,
            'resume': user.resume_path,
            'contactEmail': user.contact_email,
            'role': user.role
        }
    })


@api_bp.route('/admin/login', methods=['POST'])
def admin_login():
    data = request_data()
    email = data.get('email')
    password = data.get('password')
    if not email or not password:
        raise ValidationError('Email and password are required.')
    # Password first, so the role of an account is only revealed to its owner
    user = users.authenticate(email, password)
    if not user.is_admin:
        raise Forbidden('Access Denied. Not an administrator.')
    return jsonify({
        'message': 'Admin login successful!',
        'redirectUrl': 'admin-dashboard.html',
        'token': generate_token(user),
        'user': {
            'name': user.username,
            'email': user.email,
            'role': user.role
        }
    })
