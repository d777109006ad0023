from flask_cors import CORS
from flask_sqlalchemy import SQLAlchemy

# Initialize extensions
cors = CORS()
db = SQLAlchemy()
