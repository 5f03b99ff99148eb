from .helpers import generate_request_id, generate_access_token, utcnow, isoformat, mask_token
from .i18n import get_language, t

__all__ = ['generate_request_id', 'generate_access_token', 'utcnow', 'isoformat',
           'mask_token', 'get_language', 't']
