"""Projects and skills shown on a user's portfolio page."""
from errors import NotFound, ValidationError
from extensions import db
from models import Project, Skill
from services import storage


# --- Projects ---
def get_project(project_id):
    project = db.session.get(Project, project_id)
    if project is None:
        raise NotFound(f'Project with ID {project_id} not found.')
    return project


def list_projects(owner_id):
    return Project.query.filter_by(user_id=owner_id).order_by(Project.id).all()


def create_project(owner_id, name, demo_link=None, source_link=None, thumbnail=None):
    if not name:
        raise ValidationError('User ID and Project Name are required.')
    thumbnail_url = storage.store('projectThumbnail', thumbnail) if thumbnail else None
    project = Project(
        user_id=owner_id,
        project_name=name,
        project_demo_link=demo_link,
        project_source_link=source_link,
        project_thumbnail_path=thumbnail_url
    )
    db.session.add(project)
    db.session.commit()
    return project


def update_project(project, name, demo_link=None, source_link=None, thumbnail=None):
    if not name:
        raise ValidationError('Project Name is required.')
    # Keep the existing thumbnail unless a new one was uploaded
    if thumbnail:
        project.project_thumbnail_path = storage.store('projectThumbnail', thumbnail)
    project.project_name = name
    project.project_demo_link = demo_link
    project.project_source_link = source_link
    db.session.commit()
    return project


def delete_project(project):
    db.session.delete(project)
    db.session.commit()


# --- Skills ---
def get_skill(skill_id):
    skill = db.session.get(Skill, skill_id)
    if skill is None:
        raise NotFound(f'Skill with ID {skill_id} not found.')
    return skill


def list_skills(owner_id):
    return Skill.query.filter_by(user_id=owner_id).order_by(Skill.id).all()


def create_skill(owner_id, name, icon):
    if not name or icon is None:
        raise ValidationError('User ID, Skill Name, and Skill Icon are required.')
    icon_url = storage.store('skillIcon', icon)
    skill = Skill(user_id=owner_id, skill_name=name, skill_icon_path=icon_url)
    db.session.add(skill)
    db.session.commit()
    return skill


def delete_skill(skill):
    db.session.delete(skill)
    db.session.commit()
