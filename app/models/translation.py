"""Request and result types for the translate endpoint."""
from dataclasses import dataclass, asdict, replace

from app.errors import InvalidRequest

REQUEST_FIELDS = ('text', 'source_lang', 'target_lang', 'auth_token')


@dataclass(frozen=True)
class TranslationRequest:
    """A single translate call as received from the client.

    source_lang is empty when the provider should auto-detect it.
    """
    text: str
    target_lang: str
    source_lang: str = ''
    auth_token: str = ''

    @classmethod
    def from_json(cls, payload) -> 'TranslationRequest':
        """Build a request from a decoded JSON body.

        Absent or null fields become empty strings; emptiness of required
        fields is checked later by the pipeline.
        """
        if not isinstance(payload, dict):
            raise InvalidRequest('Invalid request: body must be a JSON object')

        values = {}
        for field in REQUEST_FIELDS:
            value = payload.get(field)
            if value is None:
                value = ''
            if not isinstance(value, str):
                raise InvalidRequest(f'Invalid request: {field} must be a string')
            try:
                # JSON allows lone surrogates ("\ud800") that cannot be sent anywhere
                value.encode('utf-8')
            except UnicodeEncodeError:
                raise InvalidRequest(f'Invalid request: {field} must be valid UTF-8 text')
            values[field] = value

        return cls(**values)


@dataclass(frozen=True)
class TranslationResult:
    translated_text: str
    source_lang: str
    target_lang: str
    cache_hit: bool = False

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> 'TranslationResult':
        """Rebuild a result from its cached form. Raises KeyError/TypeError on bad data."""
        return cls(
            translated_text=data['translated_text'],
            source_lang=data['source_lang'],
            target_lang=data['target_lang'],
            cache_hit=bool(data.get('cache_hit', False)),
        )

    def as_cache_hit(self) -> 'TranslationResult':
        return replace(self, cache_hit=True)
