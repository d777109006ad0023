from flask import jsonify

from auth import current_user, token_required
from errors import Forbidden, NotFound, ValidationError
from routes import api_bp
from routes.utils import get_upload, request_data
from services import users


# --- Unified Profile Update ---
@api_bp.route('/profile/update-all', methods=['POST'])
@token_required
def update_profile():
    data = request_data()
    email = data.get('email')
    if not email:
        raise ValidationError('Email is required.')

    caller = current_user()
    user = users.find_by_email(email)
    if user is None:
        raise NotFound('User not found.')
    if user.id != caller.id and not caller.is_admin:
        raise Forbidden('You can only update your own profile.')

    fields = {k: data[k] for k in users.PROFILE_TEXT_FIELDS if k in data}
    # 'skills' is the signup form's name for the title
    if 'title' not in fields and 'skills' in data:
        fields['title'] = data['skills']
    files = {name: get_upload(name) for name in users.PROFILE_FILE_FIELDS}

    user = users.update_profile(user, fields, files)
    return jsonify({
        'message': 'Profile updated successfully!',
        'updatedUser': {
            'userName': user.username,
            'userAbout': user.about,
            'userTitle': user.user_title,
            'userHeroDescription': user.hero_description,
            'userProfilePic': user.profile_picture_path,
            'userResume': user.resume_path,
            'userContactEmail': user.contact_email,
            'userEmail': user.email,
            'userRole': user.role
        }
    })
