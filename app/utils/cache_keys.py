"""Cache key derivation for translation results."""

CACHE_KEY_PREFIX = 'translate'


def derive_cache_key(source_lang: str, target_lang: str, text: str) -> str:
    """Build the cache key for a (source, target, text) triple.

    An empty source_lang (auto-detect) gets its own key space:
    'translate::es:hi' never equals 'translate:en:es:hi'.

    Language fields are used exactly as the caller spelled them, so 'EN'
    and 'en' are separate entries. The text is not escaped. Both language
    fields have passed normalize_language_tag() and so cannot contain ':',
    and text comes last, which keeps keys unambiguous.
    """
    return f'{CACHE_KEY_PREFIX}:{source_lang}:{target_lang}:{text}'
