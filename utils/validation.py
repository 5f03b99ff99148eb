"""
Input validation shared by every endpoint that accepts emails or profile URLs.

Validators raise werkzeug's BadRequest with a user-facing message; the API
error handler turns that into a 400 JSON response.
"""
import re
from urllib.parse import urlsplit
from flask import request
from werkzeug.exceptions import BadRequest
from .i18n import t

REQUIRED_RECRUITER_FIELDS = [
    'firstName', 'lastName', 'email', 'company', 'jobTitle',
    'candidateEmail', 'candidateName', 'positionTitle',
]
OPTIONAL_RECRUITER_FIELDS = ['companySize', 'additionalNotes']

CANDIDATE_TEXT_FIELDS = [
    'fullName', 'githubUsername', 'linkedinUrl', 'stackoverflowUrl',
    'portfolioUrl', 'additionalInfo',
]

# Field -> message key for the single-URL profile fields, checked in this order
PROFILE_URL_FIELDS = [
    ('linkedinUrl', 'error_invalid_linkedin_url'),
    ('stackoverflowUrl', 'error_invalid_stackoverflow_url'),
    ('portfolioUrl', 'error_invalid_portfolio_url'),
]

EMAIL_PATTERN = re.compile(r'^[^@\s]+@[^@\s]+\.[^@\s]+$')


def clean_text(value):
    """Strip strings; anything else that is not a string counts as absent"""
    if isinstance(value, str):
        value = value.strip()
        return value or None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def is_valid_email(value):
    return bool(value) and EMAIL_PATTERN.match(value) is not None


def is_valid_profile_url(url):
    """Absolute http(s) URL with a host and no embedded whitespace"""
    if not url or any(ch.isspace() for ch in url):
        return False
    try:
        parts = urlsplit(url)
        # Accessing port validates it
        parts.port
    except ValueError:
        return False
    return parts.scheme.lower() in ('http', 'https') and bool(parts.hostname)


def validate_recruiter_submission(data):
    """Return the cleaned recruiter/candidate fields or raise BadRequest"""
    fields = {name: clean_text(data.get(name))
              for name in REQUIRED_RECRUITER_FIELDS + OPTIONAL_RECRUITER_FIELDS}

    if not all(fields[name] for name in REQUIRED_RECRUITER_FIELDS):
        raise BadRequest(t('error_missing_fields'))

    for name in ('email', 'candidateEmail'):
        if not is_valid_email(fields[name]):
            raise BadRequest(t('error_invalid_email', field=name))

    return fields


def clean_additional_profiles(value):
    """Keep order, drop blank entries"""
    if value is None:
        return []
    if not isinstance(value, list):
        raise BadRequest(t('error_additional_profiles_list'))
    return [url for url in (clean_text(item) for item in value) if url]


def validate_candidate_submission(data):
    """Return the cleaned candidate profile fields or raise BadRequest"""
    fields = {name: clean_text(data.get(name)) for name in CANDIDATE_TEXT_FIELDS}

    if not (fields['githubUsername'] or fields['linkedinUrl'] or fields['portfolioUrl']):
        raise BadRequest(t('error_profile_required'))

    for name, message_key in PROFILE_URL_FIELDS:
        if fields[name] and not is_valid_profile_url(fields[name]):
            raise BadRequest(t(message_key))

    additional_profiles = clean_additional_profiles(data.get('additionalProfiles'))
    for url in additional_profiles:
        if not is_valid_profile_url(url):
            raise BadRequest(t('error_invalid_additional_url'))

    fields['additionalProfiles'] = additional_profiles
    return fields


def require_token(value):
    """The stripped access token; missing or blank tokens are rejected"""
    token = value.strip() if isinstance(value, str) else ''
    if not token:
        raise BadRequest(t('error_token_required'))
    return token


def read_json_body():
    """The request's JSON object; a missing or non-object body is rejected"""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise BadRequest(t('error_invalid_body'))
    return data
