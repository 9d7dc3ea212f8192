"""
Minimal Flask web service.

Serves a greeting at ``/`` and a small users API under ``/api`` guarded by
a development stub gate that only checks the Authorization header is present.
Requests pass through JSON body parsing, then the gate, then the route
handler; unhandled exceptions become an opaque 500 response.
"""

from flask import Blueprint, Flask, jsonify, request
from werkzeug.exceptions import BadRequest, HTTPException
import logging
from typing import Any, Dict, Optional

from utils import get_config, setup_logging

logger = logging.getLogger(__name__)

API_PREFIX = '/api'
FAULT_MESSAGE = 'Something went wrong!'

api = Blueprint('api', __name__, url_prefix=API_PREFIX)


@api.route('/users', methods=['GET'])
def list_users():
    """List users."""
    return jsonify({'users': []})


@api.route('/users', methods=['POST'])
def create_user():
    """Create a user. The payload is accepted but not stored."""
    return jsonify({'message': 'User created'})


def is_api_path(path: str) -> bool:
    """Return True for ``/api`` and anything below it, but not ``/apix``."""
    return path == API_PREFIX or path.startswith(API_PREFIX + '/')


def parse_json_body():
    """Parse a JSON request body up front so malformed payloads fail early."""
    if not request.is_json or not request.get_data(cache=True):
        return None
    try:
        request.get_json()
    except BadRequest:
        logger.info(f"Rejected malformed JSON body on {request.method} {request.path}")
        return jsonify({'error': 'Malformed JSON body'}), 400
    return None


def require_token_dev_stub():
    """
    Development stub authentication gate for ``/api`` routes.

    Only the presence of a non-empty Authorization header is checked; the
    token itself is never validated.
    """
    if not is_api_path(request.path):
        return None
    if not request.headers.get('Authorization'):
        return jsonify({'error': 'No token provided'}), 401
    return None


def handle_unexpected_error(error: Exception):
    """Log unhandled exceptions and hide their details from the caller."""
    if isinstance(error, HTTPException):
        return error
    logger.error(f"Unhandled error on {request.method} {request.path}: {error}", exc_info=error)
    return FAULT_MESSAGE, 500


def create_app(config_override: Optional[Dict[str, Any]] = None) -> Flask:
    """
    Build a new application instance.

    Args:
        config_override: Values applied to app.config after the environment

    Returns:
        Configured Flask application
    """
    app = Flask(__name__)
    app.config.update(get_config())
    if config_override:
        app.config.update(config_override)

    @app.route('/')
    def home():
        """Home endpoint."""
        return 'Hello World!'

    # before_request hooks run in registration order
    app.before_request(parse_json_body)
    app.before_request(require_token_dev_stub)
    app.register_blueprint(api)
    app.register_error_handler(Exception, handle_unexpected_error)

    return app


def main():
    """Start the development server on the configured port."""
    config = get_config()
    setup_logging(config['LOG_LEVEL'])

    app = create_app()
    port = config['PORT']
    logger.info(f"Server running on port {port}")
    app.run(host=config['HOST'], port=port, debug=config['DEBUG'])


if __name__ == '__main__':
    main()
