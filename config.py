import os
from dotenv import load_dotenv

load_dotenv()


def _bool(name, default=False):
    val = os.environ.get(name)
    if val is None:
        return default
    return val.lower() in ('1', 'true', 'yes', 'on')


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY', 'your-secret-key-change-this')
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URI', 'sqlite:///portfolio.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*').split(',')

    # Connection pool (ignored for SQLite)
    DB_POOL_SIZE = int(os.environ.get('DB_POOL_SIZE', 10))
    DB_MAX_OVERFLOW = int(os.environ.get('DB_MAX_OVERFLOW', 0))
    DB_POOL_TIMEOUT = int(os.environ.get('DB_POOL_TIMEOUT', 30))

    TOKEN_TTL_HOURS = int(os.environ.get('TOKEN_TTL_HOURS', 12))

    # Uploads
    STORAGE_BACKEND = os.environ.get('STORAGE_BACKEND', 'local')
    UPLOAD_FOLDER = os.environ.get('UPLOAD_FOLDER', os.path.join(os.path.dirname(__file__), 'uploads'))
    MAX_CONTENT_LENGTH = int(os.environ.get('MAX_CONTENT_LENGTH', 10 * 1024 * 1024))
    UPLOAD_TIMEOUT = int(os.environ.get('UPLOAD_TIMEOUT', 30))
    CLOUDINARY_CLOUD_NAME = os.environ.get('CLOUDINARY_CLOUD_NAME')
    CLOUDINARY_API_KEY = os.environ.get('CLOUDINARY_API_KEY')
    CLOUDINARY_API_SECRET = os.environ.get('CLOUDINARY_API_SECRET')
    CLOUDINARY_FOLDER = os.environ.get('CLOUDINARY_FOLDER', 'portfolio-assets')

    # Chat assistant
    GEMINI_API_KEY = os.environ.get('GEMINI_API_KEY')
    GEMINI_MODEL = os.environ.get('GEMINI_MODEL', 'gemini-2.5-pro')
    GEMINI_API_URL = os.environ.get('GEMINI_API_URL', 'https://generativelanguage.googleapis.com/v1beta')
    CHAT_TIMEOUT = int(os.environ.get('CHAT_TIMEOUT', 60))

    # Feedback notifications
    MAIL_ENABLED = _bool('MAIL_ENABLED', default=bool(os.environ.get('GMAIL_USER')))
    MAIL_SERVER = os.environ.get('MAIL_SERVER', 'smtp.gmail.com')
    MAIL_PORT = int(os.environ.get('MAIL_PORT', 465))
    MAIL_USERNAME = os.environ.get('MAIL_USERNAME', os.environ.get('GMAIL_USER'))
    MAIL_PASSWORD = os.environ.get('MAIL_PASSWORD', os.environ.get('GMAIL_APP_PASS'))
    MAIL_RECIPIENT = os.environ.get('MAIL_RECIPIENT', os.environ.get('GMAIL_USER'))
    MAIL_TIMEOUT = int(os.environ.get('MAIL_TIMEOUT', 20))


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    STORAGE_BACKEND = 'local'
    MAIL_ENABLED = False
    GEMINI_API_KEY = 'test-key'
