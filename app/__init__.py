from flask import Flask
from flask_cors import CORS
import logging
from dotenv import load_dotenv

from app.config import load_config
from app.errors import register_error_handlers
from app.services.google_translate import GoogleTranslateProvider
from app.services.redis_client import create_redis_client, check_connection
from app.services.result_cache import ResultCache
from app.services.translation import TranslationService

load_dotenv()

logger = logging.getLogger(__name__)


def create_app(test_config=None, store=None, provider=None):
    """Application factory.

    store and provider replace the Redis client and Google Translate client,
    which lets tests run the full pipeline against in-memory fakes.
    """
    app = Flask(__name__)

    # Config
    app.config.update(load_config())
    if test_config:
        app.config.update(test_config)

    # Collaborators are built once and shared by every request
    if store is None:
        store = create_redis_client(app.config)
        check_connection(store)
    if provider is None:
        provider = GoogleTranslateProvider(
            api_key=app.config['GOOGLE_TRANSLATE_API_KEY'],
            timeout=app.config['TRANSLATE_TIMEOUT'],
        )
        if not app.config['GOOGLE_TRANSLATE_API_KEY']:
            logger.warning("GOOGLE_TRANSLATE_API_KEY not set - translations will fail")

    cache = ResultCache(store, ttl=app.config['CACHE_TTL_SECONDS'])
    app.extensions['translation_service'] = TranslationService(
        cache=cache,
        provider=provider,
        auth_token=app.config['AUTH_TOKEN'],
    )

    if not app.config['AUTH_TOKEN']:
        logger.warning("AUTH_TOKEN not set - translate endpoint is open")

    CORS(app)
    register_error_handlers(app)

    from app.routes import register_routes
    register_routes(app)

    return app
