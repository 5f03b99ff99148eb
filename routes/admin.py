from flask import Blueprint, jsonify
from werkzeug.exceptions import BadRequest
from services import api_key_required, get_storage, send_test_email
from services.verification import live_records
from utils import isoformat, t
from utils.validation import read_json_body, clean_text, is_valid_email

admin_bp = Blueprint('admin', __name__, url_prefix='/api')

@admin_bp.route('/test-email', methods=['POST'])
def test_email():
    """Send a fixed test message to check email delivery"""
    email = clean_text(read_json_body().get('email'))
    if not email:
        raise BadRequest(t('error_email_required'))
    if not is_valid_email(email):
        raise BadRequest(t('error_invalid_email', field='email'))

    print(f"[Test Email] Testing email delivery to {email}")
    result = send_test_email(email)
    if not result['success']:
        return jsonify({'success': False, 'error': result.get('error')}), 500

    return jsonify({'success': True, 'message': t('test_email_sent')})

# Only registered when ENABLE_DEBUG_ROUTES is on
debug_bp = Blueprint('debug', __name__, url_prefix='/api/debug-storage')

@debug_bp.route('', methods=['GET'])
@api_key_required
def debug_storage():
    """Summary of everything in storage"""
    store = get_storage()
    records = live_records(store.get_all())
    return jsonify({
        'success': True,
        'backend': store.backend,
        'totalRequests': len(records),
        'requests': [{
            'id': r.id,
            'token': r.token,
            'candidateEmail': r.candidate_email,
            'candidateName': r.candidate_name,
            'status': r.status,
            'createdAt': isoformat(r.created_at)
        } for r in records]
    })

@debug_bp.route('', methods=['POST'])
@api_key_required
def debug_storage_action():
    """Storage maintenance; only 'clear' is supported"""
    action = read_json_body().get('action')
    if action != 'clear':
        raise BadRequest(t('error_invalid_action'))

    get_storage().clear()
    return jsonify({'success': True, 'message': t('storage_cleared')})
