"""
User-safe error responses for store failures.
"""
import logging

from flask import jsonify
from sqlalchemy.exc import IntegrityError

logger = logging.getLogger(__name__)

STORE_REJECTED = 'store_rejected'
STORE_ERROR = 'store_error'

ERROR_MESSAGES = {
    STORE_REJECTED: 'The user store rejected the record.',
    STORE_ERROR: 'The user store could not complete the request.',
}


def classify_store_error(exc):
    """Map a store exception onto one of the fixed error codes."""
    if isinstance(exc, IntegrityError):
        return STORE_REJECTED
    return STORE_ERROR


def store_error_response(exc, operation):
    """
    Log the full store error and build the 500 response sent to the caller.
    The driver's message stays in the server log.
    """
    code = classify_store_error(exc)
    logger.error(f"Store error during {operation} [{code}]: {exc}", exc_info=True)
    return jsonify({
        'error': ERROR_MESSAGES[code],
        'code': code,
    }), 500
