from flask import jsonify

from auth import admin_required, current_user
from errors import NotFound, ValidationError
from routes import api_bp
from services import users
from services.feedback import list_feedback


@api_bp.route('/admin/users', methods=['GET'])
@admin_required
def get_users():
    return jsonify([{
        'id': u.id,
        'username': u.username,
        'email': u.email,
        'role': u.role
    } for u in users.list_users()])


@api_bp.route('/admin/user/<int:user_id>', methods=['GET'])
@admin_required
def get_user(user_id):
    return jsonify(users.get_user(user_id).to_dict())


@api_bp.route('/admin/users/<int:user_id>', methods=['DELETE'])
@admin_required
def delete_user(user_id):
    if user_id == current_user().id:
        raise ValidationError('Administrators cannot delete their own account.')
    if not users.delete_user(user_id):
        raise NotFound(f'User with ID {user_id} not found.')
    return jsonify({'message': f'User with ID {user_id} has been deleted successfully.'})


@api_bp.route('/admin/feedback', methods=['GET'])
@admin_required
def get_feedback():
    return jsonify([f.to_dict() for f in list_feedback()])
