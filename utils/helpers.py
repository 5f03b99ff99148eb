import os
import secrets
from datetime import datetime, timezone

# Configuration
REQUEST_ID_LENGTH = int(os.environ.get('REQUEST_ID_LENGTH', '16'))
ACCESS_TOKEN_LENGTH = int(os.environ.get('ACCESS_TOKEN_LENGTH', '32'))
TOKEN_ALPHABET = 'ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789_-'


def _random_string(length):
    return ''.join(secrets.choice(TOKEN_ALPHABET) for _ in range(length))


def generate_request_id():
    """Generate the internal record key"""
    return _random_string(REQUEST_ID_LENGTH)


def generate_access_token():
    """Generate the token handed to the candidate (URL-safe, 192 bits by default)"""
    return _random_string(ACCESS_TOKEN_LENGTH)


def utcnow():
    """Current UTC time as a naive datetime, the form stored in the database"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def isoformat(value):
    """Render a naive UTC datetime as e.g. 2025-01-31T09:15:00.000Z"""
    if value is None:
        return None
    return value.isoformat(timespec='milliseconds') + 'Z'


def parse_isoformat(value):
    """Inverse of isoformat(); accepts a trailing Z or an explicit offset"""
    if not value:
        return None
    if value.endswith('Z'):
        value = value[:-1] + '+00:00'
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def mask_token(token):
    """Shorten a token for log output"""
    if not token:
        return '<none>'
    return f"{token[:6]}..."
