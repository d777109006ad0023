from flask import current_app, jsonify

from errors import ValidationError
from routes import api_bp
from routes.utils import request_data


@api_bp.route('/chat', methods=['POST'])
def chat():
    message = request_data().get('message')
    if not message:
        raise ValidationError('Message is required.')
    reply = current_app.extensions['chat_client'].complete(message)
    return jsonify({'reply': reply})
