from flask import Blueprint, request, jsonify
from werkzeug.exceptions import InternalServerError
from services import send_candidate_invitation, send_recruiter_confirmation
from services.verification import create_recruiter_request, email_data, find_active_request, candidate_view
from utils import isoformat, mask_token, t
from utils.validation import read_json_body, require_token, validate_recruiter_submission

recruiter_bp = Blueprint('recruiter', __name__, url_prefix='/api/recruiter-request')

@recruiter_bp.route('', methods=['POST'])
def create_request():
    """Create a verification request and invite the candidate"""
    fields = validate_recruiter_submission(read_json_body())

    print(f"[Recruiter Request] {fields['firstName']} {fields['lastName']} ({fields['company']}) "
          f"inviting {fields['candidateEmail']}")

    record = create_recruiter_request(fields)
    data = email_data(record)

    # The record stays stored even if the candidate could not be notified
    invitation = send_candidate_invitation(data)
    if not invitation['success']:
        print(f"[Recruiter Request] Failed to send candidate email for {record.id}: {invitation.get('error')}")
        raise InternalServerError(t('error_invitation_failed', error=invitation.get('error')))

    confirmation = send_recruiter_confirmation(data)
    if not confirmation['success']:
        print(f"[Recruiter Request] Warning: recruiter confirmation failed: {confirmation.get('error')}")

    return jsonify({
        'success': True,
        'message': t('invitation_sent'),
        'data': {
            'requestId': record.id,
            'token': record.token,
            'candidateEmail': record.candidate_email,
            'expiresAt': isoformat(record.expires_at)
        }
    })

@recruiter_bp.route('', methods=['GET'])
def request_details():
    """Redacted request details for the candidate form page"""
    token = require_token(request.args.get('token'))

    record = find_active_request(token)
    print(f"[Recruiter Request] Details served for token {mask_token(token)}")
    return jsonify({'success': True, 'data': candidate_view(record)})
