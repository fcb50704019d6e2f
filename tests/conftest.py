"""
Pytest configuration and fixtures for testing the translation service.
"""

import os
import sys
import pytest
import redis
from faker import Faker

# Add the parent directory to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from app import create_app
from app.services.google_translate import ProviderTranslation
from app.services.result_cache import ResultCache
from app.services.translation import TranslationService

fake = Faker()

TEST_AUTH_TOKEN = 'test-auth-token-for-testing'


class FakeStore:
    """In-memory stand-in for the Redis client. Flip `available` to simulate an outage."""

    def __init__(self):
        self.data = {}
        self.ttls = {}
        self.available = True
        self.get_calls = []
        self.set_calls = []

    def _check(self):
        if not self.available:
            raise redis.exceptions.ConnectionError('Connection refused')

    def get(self, key):
        self.get_calls.append(key)
        self._check()
        # redis-py encodes keys and values as strict UTF-8 before sending
        key.encode('utf-8')
        return self.data.get(key)

    def set(self, key, value, ex=None):
        self.set_calls.append(key)
        self._check()
        key.encode('utf-8')
        value.encode('utf-8')
        self.data[key] = value
        self.ttls[key] = ex
        return True

    def ping(self):
        self._check()
        return True


class FakeProvider:
    """Records calls and returns canned translations."""

    def __init__(self, detected_lang='en'):
        self.calls = []
        self.detected_lang = detected_lang
        self.canned = {('Hello, world!', 'es'): '¡Hola, mundo!'}
        self.error = None

    def translate(self, text, target_lang, source_lang=None):
        self.calls.append((text, target_lang, source_lang))
        if self.error is not None:
            raise self.error
        translated = self.canned.get((text, target_lang), f'[{target_lang}] {text}')
        return ProviderTranslation(text=translated, detected_source_lang=self.detected_lang)


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def cache(store):
    return ResultCache(store)


@pytest.fixture
def service(cache, provider):
    """Open deployment: no auth token configured."""
    return TranslationService(cache=cache, provider=provider)


@pytest.fixture
def secured_service(cache, provider):
    return TranslationService(cache=cache, provider=provider, auth_token=TEST_AUTH_TOKEN)


@pytest.fixture
def app(store, provider):
    """Create application for testing with an open translate endpoint."""
    return create_app({'TESTING': True, 'AUTH_TOKEN': ''}, store=store, provider=provider)


@pytest.fixture
def secured_app(store, provider):
    """Create application for testing with AUTH_TOKEN configured."""
    return create_app({'TESTING': True, 'AUTH_TOKEN': TEST_AUTH_TOKEN}, store=store, provider=provider)


@pytest.fixture
def client(app):
    """Create test client for each test function."""
    return app.test_client()


@pytest.fixture
def secured_client(secured_app):
    return secured_app.test_client()


@pytest.fixture
def sample_text():
    return fake.sentence(nb_words=6)
