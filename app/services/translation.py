"""Translation pipeline: auth, validation, cache lookup, provider call, write-back."""
import logging

from app.errors import MissingField, ProviderError
from app.models.translation import TranslationRequest, TranslationResult
from app.services.google_translate import ProviderTranslation
from app.services.result_cache import ResultCache
from app.utils.auth import require_token
from app.utils.cache_keys import derive_cache_key
from app.utils.languages import normalize_language_tag

logger = logging.getLogger(__name__)


class TranslationService:
    """
    Cache-aside translation orchestrator.

    Holds the long-lived collaborators shared by all requests. The pipeline
    itself keeps no per-request state, so one instance serves every worker
    thread. Concurrent identical misses may each reach the provider; the
    last cache write wins.
    """

    def __init__(self, cache: ResultCache, provider, auth_token: str | None = None):
        self.cache = cache
        self.provider = provider
        self.auth_token = auth_token

    def translate(self, request: TranslationRequest) -> TranslationResult:
        """
        Translate a request, serving it from cache when possible.

        Raises:
            Unauthorized: token mismatch (checked before anything else)
            MissingField: text or target_lang empty
            InvalidLanguageTag: unparsable source_lang/target_lang
            ProviderError: the provider failed or returned nothing
        """
        require_token(request.auth_token, self.auth_token)

        if not request.text:
            raise MissingField('text')
        if not request.target_lang:
            raise MissingField('target_lang')

        # Normalized tags are for the provider only; key and result keep the caller's spelling
        target_tag = normalize_language_tag(request.target_lang, 'target_lang')
        source_tag = ''
        if request.source_lang:
            source_tag = normalize_language_tag(request.source_lang, 'source_lang')

        cache_key = derive_cache_key(request.source_lang, request.target_lang, request.text)

        cached = self.cache.lookup(cache_key)
        if cached.found:
            return cached.result

        # Cache miss or Redis unavailable
        translation = self._call_provider(request.text, source_tag, target_tag)

        if request.source_lang:
            # Explicit source is reported back as given, not as the provider saw it
            source_lang = request.source_lang
        else:
            source_lang = translation.detected_source_lang
            if not source_lang:
                raise ProviderError("no translation returned")

        result = TranslationResult(
            translated_text=translation.text,
            source_lang=source_lang,
            target_lang=request.target_lang,
            cache_hit=False,
        )
        self.cache.store(cache_key, result)
        return result

    def _call_provider(self, text: str, source_lang: str, target_lang: str) -> ProviderTranslation:
        try:
            translation = self.provider.translate(text, target_lang, source_lang or None)
        except ProviderError:
            raise
        except Exception as e:
            raise ProviderError(f"Translation API error: {e}") from e

        if translation is None:
            raise ProviderError("no translation returned")
        return translation
