"""Error taxonomy for the translation service.

Every error carries the HTTP status it maps to, so routes can simply raise
and let the handler registered in create_app() render the response.
"""

from flask import jsonify
from werkzeug.exceptions import HTTPException
import logging

logger = logging.getLogger(__name__)


class TranslationServiceError(Exception):
    """Base class for errors that end a request with a structured response."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidRequest(TranslationServiceError):
    """Request body is not a JSON object or has a field of the wrong type."""
    status_code = 400


class MissingField(InvalidRequest):
    """A required field was empty or absent."""

    def __init__(self, field: str):
        super().__init__(f'{field} field is required')
        self.field = field


class InvalidLanguageTag(InvalidRequest):

    def __init__(self, field: str, value: str):
        super().__init__(f'Invalid {field}: {value!r} is not a valid language code')
        self.field = field
        self.value = value


class Unauthorized(TranslationServiceError):
    status_code = 401

    def __init__(self, message: str = 'Unauthorized: Invalid authentication token'):
        super().__init__(message)


class ProviderError(TranslationServiceError):
    """Any failure of the upstream translation provider."""
    status_code = 500


class StoreUnavailable(TranslationServiceError):
    """Cache store could not be reached. Absorbed by the result cache."""
    status_code = 503


def register_error_handlers(app):
    """Render service errors as {'error': message} with their status code."""

    @app.errorhandler(TranslationServiceError)
    def handle_service_error(error):
        return jsonify({'error': error.message}), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        # 404, 405 and friends raised by Flask itself
        return jsonify({'error': error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        logger.exception(f"Unhandled error: {error}")
        return jsonify({'error': 'Internal server error'}), 500
