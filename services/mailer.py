"""
Transactional email for Kredible.

Transport is picked from config on every send:
    SENDGRID_API_KEY set -> SendGrid v3 mail/send API
    MAIL_SERVER set      -> SMTP through Flask-Mail
    neither              -> simulation mode, message printed to the console

Every sender returns {'success': True} or {'success': False, 'error': msg}.
Nothing is retried.
"""
import smtplib
from email.utils import formataddr
import requests
from flask import current_app, render_template
from flask_mail import Mail, Message
from jinja2 import TemplateError, TemplateNotFound
from utils.helpers import utcnow, isoformat
from utils.i18n import get_language, t, DEFAULT_LANGUAGE

SENDGRID_API_URL = 'https://api.sendgrid.com/v3/mail/send'
SENDGRID_PLACEHOLDER_KEY = 'your-sendgrid-api-key'

mail = Mail()


def render_email_template(template_name, **context):
    """Render email template with language detection"""
    lang = get_language()
    template_path = f"email/{lang}/{template_name}"

    try:
        return render_template(template_path, **context)
    except TemplateNotFound:
        if lang == DEFAULT_LANGUAGE:
            raise
        print(f"Warning: Email template {template_path} not found, using {DEFAULT_LANGUAGE}")
        return render_template(f"email/{DEFAULT_LANGUAGE}/{template_name}", **context)


def _sendgrid_key():
    key = current_app.config.get('SENDGRID_API_KEY')
    if not key or key == SENDGRID_PLACEHOLDER_KEY:
        return None
    return key


def _sendgrid_error(response):
    try:
        errors = response.json().get('errors') or []
        if errors and errors[0].get('message'):
            return errors[0]['message']
    except ValueError:
        pass
    return f"SendGrid responded with status {response.status_code}"


def _send_via_sendgrid(api_key, to, subject, html, text, from_name):
    content = []
    if text:
        content.append({'type': 'text/plain', 'value': text})
    content.append({'type': 'text/html', 'value': html})

    payload = {
        'personalizations': [{'to': [{'email': to}]}],
        'from': {
            'email': current_app.config['FROM_EMAIL'],
            'name': from_name,
        },
        'subject': subject,
        'content': content,
        'tracking_settings': {
            'click_tracking': {'enable': True, 'enable_text': False},
            'open_tracking': {'enable': True},
        },
    }

    try:
        print(f"[EMAIL] Sending '{subject}' to {to} via SendGrid...")
        response = requests.post(
            SENDGRID_API_URL,
            json=payload,
            headers={'Authorization': f'Bearer {api_key}'},
            timeout=current_app.config['EMAIL_TIMEOUT']
        )
    except requests.RequestException as e:
        print(f"[EMAIL] Error contacting SendGrid: {e}")
        return {'success': False, 'error': str(e)}

    if response.status_code in (200, 202):
        print(f"[EMAIL] Sent to {to} (status {response.status_code}, "
              f"message id {response.headers.get('X-Message-Id', 'n/a')})")
        return {'success': True}

    error = _sendgrid_error(response)
    print(f"[EMAIL] Failed to send. Status: {response.status_code}")
    print(f"[EMAIL] Response: {response.text}")
    return {'success': False, 'error': error}


def _send_via_smtp(to, subject, html, text, from_name):
    msg = Message(
        subject=subject,
        recipients=[to],
        sender=formataddr((from_name, current_app.config['FROM_EMAIL']))
    )
    msg.body = text
    msg.html = html

    try:
        print(f"[EMAIL] Sending '{subject}' to {to} via {current_app.config['MAIL_SERVER']}...")
        mail.send(msg)
    except (smtplib.SMTPException, OSError) as e:
        print(f"[EMAIL] SMTP error: {e}")
        return {'success': False, 'error': str(e)}

    print(f"[EMAIL] Sent to {to}")
    return {'success': True}


def send_email(to, subject, html, text=None, from_name=None):
    """Send one message through the configured transport"""
    from_name = from_name or current_app.config['FROM_NAME']

    api_key = _sendgrid_key()
    if api_key:
        return _send_via_sendgrid(api_key, to, subject, html, text, from_name)

    if current_app.config.get('MAIL_SERVER'):
        return _send_via_smtp(to, subject, html, text, from_name)

    # Simulation mode for development
    print(f"[EMAIL SIMULATION] From: {formataddr((from_name, current_app.config['FROM_EMAIL']))}")
    print(f"[EMAIL SIMULATION] To: {to}")
    print(f"[EMAIL SIMULATION] Subject: {subject}")
    print(f"[EMAIL SIMULATION] Body:\n{text or html}")
    print("-" * 50)
    return {'success': True}


def send_candidate_invitation(data):
    """Email the candidate their verification link.

    Args:
        data: dict with recruiter_name, recruiter_email, recruiter_company,
            candidate_name, candidate_email, position_title,
            additional_notes (optional) and verification_link

    Returns:
        dict: {'success': bool, 'error': str (on failure)}
    """
    context = dict(data, base_url=current_app.config['BASE_URL'])
    try:
        html = render_email_template('candidate_invitation.html', **context)
        text = render_email_template('candidate_invitation.txt', **context)
    except TemplateError as e:
        print(f"[EMAIL] Error rendering candidate invitation: {e}")
        return {'success': False, 'error': 'Failed to render invitation email'}

    subject = t('email_invitation_subject',
                recruiter_name=data['recruiter_name'],
                recruiter_company=data['recruiter_company'])
    return send_email(data['candidate_email'], subject, html, text)


def send_recruiter_confirmation(data):
    """Tell the recruiter the invitation went out. Same data as the invitation."""
    context = dict(data, base_url=current_app.config['BASE_URL'])
    try:
        html = render_email_template('recruiter_confirmation.html', **context)
    except TemplateError as e:
        print(f"[EMAIL] Error rendering recruiter confirmation: {e}")
        return {'success': False, 'error': 'Failed to render confirmation email'}

    result = send_email(data['recruiter_email'], t('email_confirmation_subject'), html)
    if not result['success']:
        return {'success': False, 'error': 'Failed to send confirmation email'}
    return result


def send_test_email(address):
    """Fixed message used to check that delivery works end to end"""
    context = {
        'sent_at': isoformat(utcnow()),
        'from_email': current_app.config['FROM_EMAIL'],
        'to_email': address,
    }
    try:
        html = render_email_template('test_email.html', **context)
        text = render_email_template('test_email.txt', **context)
    except TemplateError as e:
        print(f"[EMAIL] Error rendering test email: {e}")
        return {'success': False, 'error': 'Failed to render test email'}

    return send_email(address, t('email_test_subject'), html, text, from_name='Kredible Test')
