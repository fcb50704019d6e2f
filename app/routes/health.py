"""Health check route. Only Redis is probed; the provider is not."""

from flask import Blueprint, jsonify, current_app

health_bp = Blueprint('health', __name__)


@health_bp.route('/health', methods=['GET'])
def health():
    cache = current_app.extensions['translation_service'].cache
    if not cache.ping():
        return jsonify({'status': 'unavailable', 'error': 'Redis health check failed'}), 503
    return jsonify({'status': 'ok'}), 200
