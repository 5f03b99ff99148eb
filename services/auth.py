import hmac
from functools import wraps
from flask import current_app, request
from werkzeug.exceptions import Unauthorized
from utils.i18n import t

API_KEY_HEADER = 'X-Api-Key'

def api_key_required(f):
    """Decorator to require the dashboard API key when one is configured"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        expected = current_app.config.get('DASHBOARD_API_KEY')
        if expected:
            provided = request.headers.get(API_KEY_HEADER, '')
            if not hmac.compare_digest(provided.encode(), expected.encode()):
                raise Unauthorized(t('error_unauthorized'))
        return f(*args, **kwargs)
    return decorated_function
