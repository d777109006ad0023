from flask import jsonify

from auth import current_user
from routes import api_bp
from routes.utils import request_data
from services.feedback import submit_feedback


@api_bp.route('/feedback', methods=['POST'])
def create_feedback():
    data = request_data()
    # Logged-in visitors are linked to their account; anonymous ones are not
    user = current_user(optional=True)
    submit_feedback(data.get('userEmail'), data.get('message'),
                    user_id=user.id if user else None)
    return jsonify({'message': 'Thank you! Your feedback has been submitted successfully.'}), 201
