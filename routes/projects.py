from flask import jsonify

from auth import ensure_owner, token_required
from errors import ValidationError
from routes import api_bp
from routes.utils import get_upload, parse_id, request_data
from services import portfolio, users


@api_bp.route('/user/<int:user_id>/projects', methods=['GET'])
def get_projects(user_id):
    return jsonify([p.to_dict() for p in portfolio.list_projects(user_id)])


@api_bp.route('/project', methods=['POST'])
@token_required
def create_project():
    data = request_data()
    if not data.get('userId') or not data.get('projectName'):
        raise ValidationError('User ID and Project Name are required.')
    owner_id = parse_id(data['userId'])
    ensure_owner(owner_id)
    users.get_user(owner_id)
    project = portfolio.create_project(
        owner_id,
        data['projectName'],
        demo_link=data.get('demoLink'),
        source_link=data.get('sourceLink'),
        thumbnail=get_upload('projectThumbnail')
    )
    return jsonify({'message': 'Project added successfully!', 'id': project.id}), 201


@api_bp.route('/project/<int:project_id>', methods=['PUT'])
@token_required
def update_project(project_id):
    project = portfolio.get_project(project_id)
    ensure_owner(project.user_id)
    data = request_data()
    portfolio.update_project(
        project,
        data.get('projectName'),
        demo_link=data.get('demoLink'),
        source_link=data.get('sourceLink'),
        thumbnail=get_upload('projectThumbnail')
    )
    return jsonify({'message': 'Project updated successfully!'})


@api_bp.route('/project/<int:project_id>', methods=['DELETE'])
@token_required
def delete_project(project_id):
    project = portfolio.get_project(project_id)
    ensure_owner(project.user_id)
    portfolio.delete_project(project)
    return jsonify({'message': 'Project deleted successfully.'})
