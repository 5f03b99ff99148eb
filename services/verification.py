"""
Lifecycle of a recruiter request: creation, token lookup with lazy expiry,
and completion with the candidate's profile.
"""
from flask import current_app
from werkzeug.exceptions import Conflict, Gone, InternalServerError, NotFound
from models import RecruiterRequest, CandidateProfile
from models.recruiter_request import REQUEST_TTL, STATUS_PENDING, STATUS_COMPLETED
from utils.helpers import generate_request_id, generate_access_token, utcnow, isoformat, mask_token
from utils.i18n import t
from .storage import get_storage


def _unused_token(store):
    while True:
        token = generate_access_token()
        if not store.find_by_token(token):
            return token


def create_recruiter_request(fields):
    """Build and persist a pending request from validated recruiter fields"""
    store = get_storage()
    now = utcnow()

    record = RecruiterRequest(
        id=generate_request_id(),
        token=_unused_token(store),
        first_name=fields['firstName'],
        last_name=fields['lastName'],
        email=fields['email'],
        company=fields['company'],
        job_title=fields['jobTitle'],
        company_size=fields.get('companySize'),
        candidate_name=fields['candidateName'],
        candidate_email=fields['candidateEmail'],
        position_title=fields['positionTitle'],
        additional_notes=fields.get('additionalNotes'),
        status=STATUS_PENDING,
        created_at=now,
        expires_at=now + REQUEST_TTL
    )

    if not store.save(record):
        raise InternalServerError(t('error_storage_failed'))
    return record


def verification_link(record):
    return f"{current_app.config['BASE_URL'].rstrip('/')}/candidate-form/{record.token}"


def email_data(record):
    """Fields shared by the invitation and the recruiter confirmation"""
    return {
        'recruiter_name': record.recruiter_name,
        'recruiter_email': record.email,
        'recruiter_company': record.company,
        'candidate_name': record.candidate_name,
        'candidate_email': record.candidate_email,
        'position_title': record.position_title,
        'additional_notes': record.additional_notes,
        'verification_link': verification_link(record),
    }


def find_active_request(token):
    """Return the live record for a token.

    Raises NotFound for unknown tokens and Gone for expired ones; an expired
    record is deleted before Gone is raised.
    """
    store = get_storage()
    record = store.find_by_token(token)
    if record is None:
        print(f"[Verification] Token not found: {mask_token(token)}")
        raise NotFound(t('error_invalid_token'))

    if record.is_expired():
        print(f"[Verification] Request {record.id} expired at {isoformat(record.expires_at)}, removing")
        store.delete(record.id)
        raise Gone(t('error_token_expired'))

    return record


def live_records(records):
    """Drop expired records from a listing, deleting them from storage"""
    store = get_storage()
    now = utcnow()
    live = []
    for record in records:
        if record.is_expired(now):
            store.delete(record.id)
        else:
            live.append(record)
    return live


def ensure_pending(record):
    """Candidate data is written once; a completed request rejects resubmission"""
    if record.status == STATUS_COMPLETED or record.candidate_profile is not None:
        raise Conflict(t('error_already_completed'))


def complete_request(record, profile_fields):
    """Attach validated candidate data and mark the request completed"""
    ensure_pending(record)

    record.candidate_profile = CandidateProfile(
        full_name=profile_fields['fullName'],
        github_username=profile_fields['githubUsername'],
        linkedin_url=profile_fields['linkedinUrl'],
        stackoverflow_url=profile_fields['stackoverflowUrl'],
        portfolio_url=profile_fields['portfolioUrl'],
        additional_profiles=profile_fields['additionalProfiles'],
        additional_info=profile_fields['additionalInfo'],
        submitted_at=utcnow()
    )
    record.status = STATUS_COMPLETED

    if not get_storage().save(record):
        raise InternalServerError(t('error_storage_failed'))
    return record


def candidate_view(record):
    """What the candidate-facing page may see about a request"""
    return {
        'recruiterName': record.recruiter_name,
        'recruiterCompany': record.company,
        'candidateName': record.candidate_name,
        'candidateEmail': record.candidate_email,
        'positionTitle': record.position_title,
        'additionalNotes': record.additional_notes,
        'status': record.status,
        'createdAt': isoformat(record.created_at),
        'expiresAt': isoformat(record.expires_at),
    }
