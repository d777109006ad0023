from flask import Blueprint

api_bp = Blueprint('api', __name__)

# Route modules register themselves on api_bp
from routes import accounts, admin, profile, projects, skills, feedback, chat, uploads  # noqa: E402,F401
