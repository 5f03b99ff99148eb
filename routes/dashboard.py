from flask import Blueprint, jsonify
from services import api_key_required, get_storage
from services.verification import live_records
from utils import isoformat

dashboard_bp = Blueprint('dashboard', __name__, url_prefix='/api/dashboard')

def request_summary(record):
    """Flattened request shape for the dashboard's request list"""
    profile = record.candidate_profile
    return {
        'requestId': record.id,
        'token': record.token,
        'recruiterInfo': {
            'firstName': record.first_name,
            'lastName': record.last_name,
            'email': record.email,
            'company': record.company,
            'jobTitle': record.job_title
        },
        'candidateInfo': {
            'name': record.candidate_name,
            'email': record.candidate_email,
            'positionTitle': record.position_title
        },
        'additionalNotes': record.additional_notes,
        'createdAt': isoformat(record.created_at),
        'expiresAt': isoformat(record.expires_at),
        'status': record.status,
        'candidateData': profile.to_dict() if profile else None
    }

def completed_profile(record):
    """Completed request shape: identities apart from the submitted profile"""
    return {
        'token': record.token,
        'requestId': record.id,
        'recruiterInfo': {
            'firstName': record.first_name,
            'lastName': record.last_name,
            'company': record.company
        },
        'candidateInfo': {
            'name': record.candidate_name,
            'email': record.candidate_email,
            'positionTitle': record.position_title
        },
        'profile': record.candidate_profile.to_dict()
    }

@dashboard_bp.route('/requests')
@api_key_required
def list_requests():
    """Every live request"""
    requests = [request_summary(r) for r in live_records(get_storage().get_all())]
    print(f"[Dashboard] Found {len(requests)} recruiter requests")
    return jsonify({'success': True, 'requests': requests})

@dashboard_bp.route('/profiles')
@api_key_required
def list_profiles():
    """Requests whose candidate has submitted a profile"""
    profiles = [completed_profile(r) for r in live_records(get_storage().get_completed())]
    print(f"[Dashboard] Found {len(profiles)} completed profiles")
    return jsonify({'success': True, 'profiles': profiles})
