"""
User REST routes.
"""
from flask import Blueprint, jsonify, request
from sqlalchemy.exc import SQLAlchemyError

from app.services import get_user_service
from app.utils.errors import store_error_response

users_bp = Blueprint('users', __name__)


@users_bp.route('/users', methods=['GET'])
def list_users():
    """Return all users as a JSON array."""
    try:
        users = get_user_service().list_users()
    except SQLAlchemyError as e:
        return store_error_response(e, 'list_users')
    return jsonify(users)


@users_bp.route('/users', methods=['POST'])
def create_user():
    """
    Insert a user from a ``{"name": ...}`` body and return the stored record.
    """
    payload = request.get_json(silent=True)
    name = payload.get('name') if isinstance(payload, dict) else None
    try:
        user = get_user_service().create_user(name)
    except SQLAlchemyError as e:
        return store_error_response(e, 'create_user')
    return jsonify(user)
