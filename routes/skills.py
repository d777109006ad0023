from flask import jsonify

from auth import ensure_owner, token_required
from errors import ValidationError
from routes import api_bp
from routes.utils import get_upload, parse_id, request_data
from services import portfolio, users


@api_bp.route('/user/<int:user_id>/skills', methods=['GET'])
def get_skills(user_id):
    return jsonify([s.to_dict() for s in portfolio.list_skills(user_id)])


@api_bp.route('/skill', methods=['POST'])
@token_required
def create_skill():
    data = request_data()
    icon = get_upload('skillIcon')
    if not data.get('userId') or not data.get('skillName') or icon is None:
        raise ValidationError('User ID, Skill Name, and Skill Icon are required.')
    owner_id = parse_id(data['userId'])
    ensure_owner(owner_id)
    users.get_user(owner_id)
    skill = portfolio.create_skill(owner_id, data['skillName'], icon)
    return jsonify({'message': 'Skill added successfully!', 'id': skill.id}), 201


@api_bp.route('/skill/<int:skill_id>', methods=['DELETE'])
@token_required
def delete_skill(skill_id):
    skill = portfolio.get_skill(skill_id)
    ensure_owner(skill.user_id)
    portfolio.delete_skill(skill)
    return jsonify({'message': 'Skill deleted successfully.'})
