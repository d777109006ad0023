"""Fire-and-forget email notifications over SMTP."""
import logging
import smtplib
import threading
from email.message import EmailMessage
from html import escape

logger = logging.getLogger(__name__)


class Mailer:
    def __init__(self, server, port, username, password, recipient, timeout=20, enabled=True):
        self.server = server
        self.port = port
        self.username = username
        self.password = password
        self.recipient = recipient
        self.timeout = timeout
        self.enabled = enabled and bool(username and recipient)

    @classmethod
    def from_config(cls, config):
        return cls(
            config['MAIL_SERVER'],
            config['MAIL_PORT'],
            config['MAIL_USERNAME'],
            config['MAIL_PASSWORD'],
            config['MAIL_RECIPIENT'],
            timeout=config['MAIL_TIMEOUT'],
            enabled=config['MAIL_ENABLED'],
        )

    def build_feedback_message(self, user_email, message):
        msg = EmailMessage()
        msg['Subject'] = 'New Feedback Received on Your Platform!'
        msg['From'] = f'"{user_email} via Portfolio Platform" <{self.username}>'
        msg['To'] = self.recipient
        msg['Reply-To'] = user_email
        msg.set_content(f'New feedback from {user_email}:\n\n{message}')
        msg.add_alternative(
            '<h3>You have received new feedback.</h3>'
            f'<p><b>From:</b> {escape(user_email)}</p>'
            '<p><b>Message:</b></p>'
            '<blockquote style="border-left: 2px solid #ccc; padding-left: 10px; margin-left: 5px;">'
            f'{escape(message)}</blockquote>'
            '<hr><p><i>This is an automated message from your portfolio platform.</i></p>',
            subtype='html',
        )
        return msg

    def send(self, msg):
        with smtplib.SMTP_SSL(self.server, self.port, timeout=self.timeout) as smtp:
            if self.password:
                smtp.login(self.username, self.password)
            smtp.send_message(msg)

    def _send_quietly(self, msg):
        try:
            self.send(msg)
            logger.info('Feedback email sent to %s', self.recipient)
        except (smtplib.SMTPException, OSError) as e:
            logger.error('Error sending feedback email: %s', e)

    def notify_feedback(self, user_email, message):
        """Send the notification on a background thread; never raises."""
        if not self.enabled:
            logger.debug('Mail disabled, skipping feedback notification')
            return None
        msg = self.build_feedback_message(user_email, message)
        thread = threading.Thread(target=self._send_quietly, args=(msg,), daemon=True)
        thread.start()
        return thread
