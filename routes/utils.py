from flask import request

from errors import ValidationError


def request_data():
    """Body fields from either a JSON or a form/multipart request."""
    if request.is_json:
        data = request.get_json(silent=True)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValidationError('Request body must be a JSON object.')
        return data
    return request.form.to_dict()


def get_upload(field_name):
    """The single file sent under ``field_name``, or None."""
    files = [f for f in request.files.getlist(field_name) if f and f.filename]
    if len(files) > 1:
        raise ValidationError(f'Only one file is allowed for {field_name}.')
    return files[0] if files else None


def parse_id(value, label='User ID'):
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f'{label} must be an integer.')
