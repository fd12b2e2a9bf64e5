# ------- checkout_api/utils/decorators.py -------
from functools import wraps
from flask import request, jsonify

from ..utils.api import api_error

def require_json(f):
    """Reject bodies that are not JSON objects before the view runs."""
    @wraps(f)
    def wrapper(*args, **kwargs):
        if not request.is_json:
            return jsonify(api_error("Content-Type must be application/json")), 415
        payload = request.get_json(silent=True)
        if payload is not None and not isinstance(payload, dict):
            return jsonify(api_error("request body must be a JSON object")), 400
        return f(*args, **kwargs)
    return wrapper
