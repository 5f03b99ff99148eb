from .auth import api_key_required
from .mailer import mail, send_candidate_invitation, send_recruiter_confirmation, send_test_email
from .storage import get_storage, init_storage

__all__ = ['api_key_required', 'mail', 'send_candidate_invitation', 'send_recruiter_confirmation',
           'send_test_email', 'get_storage', 'init_storage']
