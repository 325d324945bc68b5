"""
Page and health routes.
"""
from flask import Blueprint, current_app, jsonify, render_template

main_bp = Blueprint('main', __name__)


@main_bp.route('/health')
def health():
    """Health check endpoint for uptime monitoring."""
    return jsonify({
        'status': 'healthy',
        'service': 'user-roster'
    }), 200


@main_bp.route('/')
def index():
    """Serve the single-page user list."""
    return render_template('index.html', api_base=current_app.config['API_PREFIX'])
