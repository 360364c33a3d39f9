from flask import request
from wishlist_service.errors import ValidationError


def json_body():
    """Return the JSON request body as a dict; a missing body counts as empty."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError('Invalid request body')
    return data
