# platapay/services/email_service.py
# This service is responsible for applicant email notifications.

import smtplib
from email.message import EmailMessage
from urllib.parse import quote
from datetime import date
from flask import current_app
from platapay.utils import generate_verification_token


def _send_email(msg):
    """Sends a message synchronously over SMTP. Errors propagate to the caller."""
    config = current_app.config
    smtp = smtplib.SMTP(config['MAIL_SERVER'], config['MAIL_PORT'])
    try:
        if config['MAIL_USE_TLS']:
            smtp.starttls()
        if config.get('MAIL_PASSWORD'):
            smtp.login(config['MAIL_USERNAME'], config['MAIL_PASSWORD'])
        smtp.send_message(msg)
    finally:
        smtp.quit()

    current_app.logger.info(f"Email sent to {msg['To']}")


def send_email(to_address, subject, body_text):
    msg = EmailMessage()
    msg['Subject'] = subject
    msg['From'] = current_app.config['MAIL_USERNAME']
    msg['To'] = to_address
    msg.set_content(body_text)

    _send_email(msg)


def build_verification_link(email):
    token = generate_verification_token(email)
    base_url = current_app.config['APP_URL'].rstrip('/')
    return f"{base_url}/verify?token={token}&email={quote(email, safe='')}"


def send_verification_email(full_name, email):
    """
    Emails an applicant a link to verify their address.

    The token is not stored; the link carries it with the email address.

    Returns:
        dict on success, or (error_dict, status_code).
    """
    if not isinstance(full_name, str) or not full_name.strip() \
            or not isinstance(email, str) or not email.strip():
        return {"success": False, "error": "Full name and email are required"}, 400

    if not current_app.config.get('MAIL_USERNAME'):
        current_app.logger.error("MAIL_USERNAME is not configured. Cannot send verification email.")
        return {"success": False, "error": "Failed to send verification email"}, 500

    email = email.strip()
    today = date.today()
    body = (
        f"Hello {full_name.strip()},\n\n"
        f"Thank you for applying to become a PlataPay agent. "
        f"Please confirm {email} by opening the link below:\n\n"
        f"{build_verification_link(email)}\n\n"
        f"Sent on {today.strftime('%B')} {today.day}, {today.year}.\n"
        f"(c) {today.year} PlataPay"
    )

    try:
        send_email(email, "Verify Your Email - PlataPay Agent Application", body)
    except (smtplib.SMTPException, OSError) as e:
        current_app.logger.error(f"Error sending verification email to {email}: {str(e)}")
        return {"success": False, "error": "Failed to send verification email"}, 500

    return {"success": True, "message": "Verification email sent successfully"}
