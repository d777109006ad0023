"""Asset upload gateway.

Uploaded files are handed to a storage backend that returns a URL the
browser can dereference directly. Two backends exist: ``local`` writes into
``UPLOAD_FOLDER`` and ``cloudinary`` pushes the bytes to Cloudinary.
"""
import logging
import os
from datetime import datetime

import cloudinary
import cloudinary.uploader
from cloudinary.exceptions import Error as CloudinaryError
from flask import current_app
from werkzeug.utils import secure_filename

from errors import UploadError, ValidationError

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = {'jpg', 'jpeg', 'png'}

# Multipart field name -> allowed extensions
UPLOAD_FIELDS = {
    'profilePicture': IMAGE_EXTENSIONS,
    'projectThumbnail': IMAGE_EXTENSIONS,
    'skillIcon': IMAGE_EXTENSIONS,
    'resumePdf': {'pdf'},
}


def file_extension(filename):
    if not filename or '.' not in filename:
        return ''
    return filename.rsplit('.', 1)[1].lower()


def validate_upload(field_name, file):
    if field_name not in UPLOAD_FIELDS:
        raise ValidationError(f'Unknown upload field: {field_name}')
    allowed = UPLOAD_FIELDS[field_name]
    if file_extension(file.filename) not in allowed:
        raise ValidationError(
            f"Invalid file type for {field_name}. Allowed: {', '.join(sorted(allowed))}"
        )


class LocalStorage:
    """Saves uploads to disk; served back by ``GET /uploads/<filename>``."""

    def __init__(self, folder, url_prefix='/uploads'):
        self.folder = folder
        self.url_prefix = url_prefix.rstrip('/')

    def save(self, field_name, file):
        os.makedirs(self.folder, exist_ok=True)
        filename = secure_filename(file.filename)
        timestamp = datetime.utcnow().strftime('%Y%m%d%H%M%S%f')
        filename = f"{field_name}_{timestamp}_{filename}"
        try:
            file.save(os.path.join(self.folder, filename))
        except OSError as e:
            raise UploadError(f'Failed to store {field_name}: {e}')
        return f"{self.url_prefix}/{filename}"


class CloudinaryStorage:
    def __init__(self, cloud_name, api_key, api_secret, folder='portfolio-assets', timeout=30):
        cloudinary.config(
            cloud_name=cloud_name,
            api_key=api_key,
            api_secret=api_secret,
            secure=True,
        )
        self.folder = folder
        self.timeout = timeout

    def save(self, field_name, file):
        allowed = sorted(UPLOAD_FIELDS[field_name])
        try:
            result = cloudinary.uploader.upload(
                file.stream,
                folder=self.folder,
                resource_type='auto',
                allowed_formats=allowed,
                timeout=self.timeout,
            )
        except CloudinaryError as e:
            raise UploadError(f'Failed to upload {field_name}: {e}')
        url = result.get('secure_url') or result.get('url')
        if not url:
            raise UploadError(f'Failed to upload {field_name}: no URL returned')
        return url


def init_storage(app):
    backend = app.config.get('STORAGE_BACKEND', 'local')
    if backend == 'local':
        storage = LocalStorage(app.config['UPLOAD_FOLDER'])
    elif backend == 'cloudinary':
        storage = CloudinaryStorage(
            app.config['CLOUDINARY_CLOUD_NAME'],
            app.config['CLOUDINARY_API_KEY'],
            app.config['CLOUDINARY_API_SECRET'],
            folder=app.config['CLOUDINARY_FOLDER'],
            timeout=app.config['UPLOAD_TIMEOUT'],
        )
    else:
        raise ValueError(f'Unknown STORAGE_BACKEND: {backend}')
    app.extensions['asset_storage'] = storage
    return storage


def store(field_name, file):
    """Validate and upload one file, returning its public URL."""
    validate_upload(field_name, file)
    storage = current_app.extensions['asset_storage']
    url = storage.save(field_name, file)
    logger.info('Stored %s upload at %s', field_name, url)
    return url
