"""Error types raised by services and routes, and their JSON rendering."""
from flask import jsonify
from werkzeug.exceptions import HTTPException

from extensions import db


class APIError(Exception):
    status_code = 500
    message = 'An error occurred on the server.'

    def __init__(self, message=None, status_code=None):
        super().__init__(message or self.message)
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(APIError):
    status_code = 400
    message = 'Missing or invalid fields.'


class AuthError(APIError):
    status_code = 401
    message = 'Invalid email or password.'


class Forbidden(AuthError):
    status_code = 403
    message = 'You are not allowed to perform this action.'


class NotFound(APIError):
    status_code = 404
    message = 'Not found.'


class Conflict(APIError):
    status_code = 409
    message = 'Resource already exists.'


class UpstreamError(APIError):
    status_code = 500
    message = 'An upstream service failed.'


class UploadError(UpstreamError):
    message = 'File upload failed.'


def register_error_handlers(app):
    @app.errorhandler(APIError)
    def handle_api_error(err):
        if err.status_code >= 500:
            app.logger.error('%s: %s', type(err).__name__, err.message)
        return jsonify({'message': err.message}), err.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(err):
        if err.code is None or err.code < 400:
            return err
        return jsonify({'message': err.description}), err.code

    @app.errorhandler(Exception)
    def handle_unexpected(err):
        db.session.rollback()
        app.logger.exception('Unhandled error: %s', err)
        return jsonify({'message': 'An error occurred on the server.'}), 500
