"""
Error taxonomy for the wishlist service and the Flask handlers that render it.
Every response body carries a single ``msg`` field.
"""

import logging
from flask import jsonify
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    status_code = 500
    message = 'Server error'

    def __init__(self, message=None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class ValidationError(ServiceError):
    status_code = 400
    message = 'Invalid input'


class InvalidCredentialError(ServiceError):
    status_code = 400
    message = 'Invalid OTP'


class DuplicateError(ServiceError):
    status_code = 400
    message = 'Item already in wishlist'


class AuthorizationError(ServiceError):
    status_code = 401
    message = 'User not authorized'


class NotFoundError(ServiceError):
    status_code = 404
    message = 'Not found'


class StorageUnavailableError(ServiceError):
    """Raised by the durable store; the fallback coordinator always absorbs it."""
    message = 'Storage unavailable'


class UnexpectedError(ServiceError):
    pass


def register_error_handlers(app):
    @app.errorhandler(ServiceError)
    def handle_service_error(error):
        if error.status_code >= 500:
            logger.error("Internal service error: %s", error)
            return jsonify({'msg': UnexpectedError.message}), error.status_code
        return jsonify({'msg': error.message}), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({'msg': error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        logger.exception("Unhandled error: %s", error)
        unexpected = UnexpectedError()
        return jsonify({'msg': unexpected.message}), unexpected.status_code
