import logging

from flask import current_app

from errors import ValidationError
from extensions import db
from models import Feedback

logger = logging.getLogger(__name__)


def submit_feedback(user_email, message, user_id=None):
    user_email = (user_email or '').strip()
    message = (message or '').strip()
    if not user_email or not message:
        raise ValidationError('Email and message are required.')
    feedback = Feedback(user_id=user_id, user_email=user_email, message=message)
    db.session.add(feedback)
    db.session.commit()

    # Best effort: the submission stands even if the notification fails
    try:
        current_app.extensions['mailer'].notify_feedback(user_email, message)
    except Exception as e:
        logger.error('Could not queue feedback notification: %s', e)
    return feedback


def list_feedback():
    return Feedback.query.order_by(Feedback.submitted_at.desc(), Feedback.id.desc()).all()
