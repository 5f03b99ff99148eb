import traceback
from flask import jsonify
from werkzeug.exceptions import HTTPException
from utils.i18n import t
from .recruiter import recruiter_bp
from .candidate import candidate_bp
from .dashboard import dashboard_bp
from .admin import admin_bp, debug_bp

def register_blueprints(app):
    """Register all blueprints with the Flask app"""
    app.register_blueprint(recruiter_bp)
    app.register_blueprint(candidate_bp)
    app.register_blueprint(dashboard_bp)
    app.register_blueprint(admin_bp)
    if app.config['ENABLE_DEBUG_ROUTES']:
        app.register_blueprint(debug_bp)

def register_error_handlers(app):
    """Render every error as {success: false, error: message}"""
    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        if error.code is None or error.code < 400:
            return error
        return jsonify({'success': False, 'error': error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        print(f"[Error] Unhandled exception: {error}")
        traceback.print_exc()
        return jsonify({'success': False, 'error': t('error_internal')}), 500
