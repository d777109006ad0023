from datetime import datetime
from extensions import db

ROLE_USER = 'user'
ROLE_ADMIN = 'admin'


class User(db.Model):
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(120), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    role = db.Column(db.String(20), nullable=False, default=ROLE_USER)
    about = db.Column(db.Text)
    hero_description = db.Column(db.Text)
    user_title = db.Column(db.String(200))
    profile_picture_path = db.Column(db.String(500))
    resume_path = db.Column(db.String(500))
    contact_email = db.Column(db.String(120))
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    projects = db.relationship('Project', backref='owner', cascade='all, delete-orphan')
    skills = db.relationship('Skill', backref='owner', cascade='all, delete-orphan')

    @property
    def is_admin(self):
        return self.role == ROLE_ADMIN

    def to_dict(self):
        """Full row without the password digest."""
        return {
            'id': self.id,
            'username': self.username,
            'email': self.email,
            'role': self.role,
            'about': self.about,
            'hero_description': self.hero_description,
            'user_title': self.user_title,
            'profile_picture_path': self.profile_picture_path,
            'resume_path': self.resume_path,
            'contact_email': self.contact_email,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }


class Project(db.Model):
    __tablename__ = 'projects'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    project_name = db.Column(db.String(200), nullable=False)
    project_demo_link = db.Column(db.String(500))
    project_source_link = db.Column(db.String(500))
    project_thumbnail_path = db.Column(db.String(500))
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'user_id': self.user_id,
            'project_name': self.project_name,
            'project_demo_link': self.project_demo_link,
            'project_source_link': self.project_source_link,
            'project_thumbnail_path': self.project_thumbnail_path,
        }


class Skill(db.Model):
    __tablename__ = 'skills'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    skill_name = db.Column(db.String(100), nullable=False)
    skill_icon_path = db.Column(db.String(500), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'user_id': self.user_id,
            'skill_name': self.skill_name,
            'skill_icon_path': self.skill_icon_path,
        }


class Feedback(db.Model):
    __tablename__ = 'feedback'

    id = db.Column(db.Integer, primary_key=True)
    # Anonymous visitors may leave feedback, so no foreign key
    user_id = db.Column(db.Integer)
    user_email = db.Column(db.String(120), nullable=False)
    message = db.Column(db.Text, nullable=False)
    submitted_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)

    def to_dict(self):
        return {
            'user_email': self.user_email,
            'message': self.message,
            'submitted_at': self.submitted_at.isoformat() if self.submitted_at else None,
        }
