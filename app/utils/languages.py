"""Language code validation.

Accepts ISO 639 primary codes with optional script and region subtags,
e.g. 'en', 'en-US', 'zh-Hant-TW', 'es_419'.
"""

import re

from app.errors import InvalidLanguageTag

LANGUAGE_TAG_RE = re.compile(
    r'^(?P<language>[A-Za-z]{2,3})'
    r'(?:[-_](?P<script>[A-Za-z]{4}))?'
    r'(?:[-_](?P<region>[A-Za-z]{2}|[0-9]{3}))?$'
)


def normalize_language_tag(tag: str, field: str = 'target_lang') -> str:
    """Return the canonical form of a language code.

    Raises InvalidLanguageTag (naming `field`) when the code does not parse.
    """
    match = LANGUAGE_TAG_RE.match(tag.strip())
    if not match:
        raise InvalidLanguageTag(field, tag)

    parts = [match.group('language').lower()]
    if match.group('script'):
        parts.append(match.group('script').title())
    if match.group('region'):
        parts.append(match.group('region').upper())
    return '-'.join(parts)
