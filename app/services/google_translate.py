"""Google Cloud Translation (v2 REST) provider."""
import logging
from dataclasses import dataclass

import requests

from app.errors import ProviderError

logger = logging.getLogger(__name__)

GOOGLE_TRANSLATE_URL = 'https://translation.googleapis.com/language/translate/v2'


@dataclass(frozen=True)
class ProviderTranslation:
    text: str
    detected_source_lang: str


class GoogleTranslateProvider:
    """
    Thin client for the Cloud Translation basic API.

    Every failure (timeout, transport error, API error, unexpected payload)
    is raised as ProviderError. No retries are attempted here.
    """

    def __init__(self, api_key: str, timeout: float = 10.0, url: str = GOOGLE_TRANSLATE_URL):
        self.api_key = api_key
        self.timeout = timeout
        self.url = url

    def translate(self, text: str, target_lang: str, source_lang: str | None = None) -> ProviderTranslation:
        """
        Translate text into target_lang.

        Args:
            text: Text to translate
            target_lang: Target language code
            source_lang: Source language code, or None to let Google detect it

        Returns:
            ProviderTranslation with the translated text and the source language
            Google reports (empty if it could not detect one)
        """
        if not self.api_key:
            raise ProviderError("Translation API error: GOOGLE_TRANSLATE_API_KEY is not configured")

        params = {
            'key': self.api_key,
            'q': text,
            'target': target_lang,
            'format': 'text',
        }
        if source_lang:
            params['source'] = source_lang

        try:
            response = requests.post(self.url, data=params, timeout=self.timeout)
        except requests.Timeout as e:
            logger.warning("Google Translate timeout")
            raise ProviderError("Translation API error: request timed out") from e
        except requests.RequestException as e:
            logger.warning(f"Google Translate error: {e}")
            raise ProviderError(f"Translation API error: {e}") from e

        try:
            result = response.json()
        except ValueError as e:
            logger.warning(f"Google Translate returned non-JSON response (HTTP {response.status_code})")
            raise ProviderError(
                f"Translation API error: unexpected response (HTTP {response.status_code})"
            ) from e

        if not isinstance(result, dict):
            raise ProviderError("Translation API error: unexpected response format")

        if 'error' in result or not response.ok:
            error = result.get('error') or {}
            message = error.get('message', f'HTTP {response.status_code}') if isinstance(error, dict) else str(error)
            logger.warning(f"Google Translate error: {message}")
            raise ProviderError(f"Translation API error: {message}")

        translations = (result.get('data') or {}).get('translations') or []
        if not translations:
            raise ProviderError("no translation returned")

        translation = translations[0]
        if 'translatedText' not in translation:
            raise ProviderError("Translation API error: unexpected response format")

        return ProviderTranslation(
            text=translation['translatedText'],
            detected_source_lang=translation.get('detectedSourceLanguage') or source_lang or '',
        )
