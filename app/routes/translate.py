"""Translate route."""

from flask import Blueprint, request, jsonify, current_app

from app.errors import InvalidRequest
from app.models.translation import TranslationRequest

translate_bp = Blueprint('translate', __name__)


@translate_bp.route('/translate', methods=['POST'])
def translate():
    """Translate a piece of text.

    Body: {text, source_lang?, target_lang, auth_token?}
    Returns: {translated_text, source_lang, target_lang, cache_hit}
    """
    data = request.get_json(silent=True)
    if data is None:
        raise InvalidRequest('Invalid request: body must be valid JSON')

    translation_request = TranslationRequest.from_json(data)
    service = current_app.extensions['translation_service']
    result = service.translate(translation_request)

    return jsonify(result.to_dict()), 200
