from flask import Blueprint, request, jsonify
from services.verification import find_active_request, ensure_pending, complete_request, candidate_view
from utils import isoformat, mask_token, t
from utils.validation import read_json_body, require_token, validate_candidate_submission

candidate_bp = Blueprint('candidate', __name__, url_prefix='/api/candidate-submit')

@candidate_bp.route('', methods=['POST'])
def submit_profile():
    """Store the candidate's profile links against their token"""
    data = read_json_body()
    token = require_token(data.get('token'))
    print(f"[Candidate Submit] Received submission for token {mask_token(token)}")

    record = find_active_request(token)
    ensure_pending(record)
    profile_fields = validate_candidate_submission(data)
    record = complete_request(record, profile_fields)

    print(f"[Candidate Submit] Request {record.id} completed")

    return jsonify({
        'success': True,
        'message': t('profile_submitted'),
        'data': {
            'requestId': record.id,
            'candidateName': record.candidate_name,
            'submittedAt': isoformat(record.candidate_profile.submitted_at)
        }
    })

@candidate_bp.route('', methods=['GET'])
def validate_token():
    """Check a candidate token before showing the form"""
    token = require_token(request.args.get('token'))
    record = find_active_request(token)
    return jsonify({'success': True, 'data': candidate_view(record)})
