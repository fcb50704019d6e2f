from app.utils.cache_keys import derive_cache_key


def test_derivation_is_deterministic():
    assert derive_cache_key('en', 'es', 'hi') == derive_cache_key('en', 'es', 'hi')


def test_auto_detect_does_not_collide_with_explicit_source():
    assert derive_cache_key('en', 'es', 'hi') != derive_cache_key('', 'es', 'hi')


def test_every_field_contributes():
    base = derive_cache_key('en', 'es', 'hi')
    assert derive_cache_key('fr', 'es', 'hi') != base
    assert derive_cache_key('en', 'de', 'hi') != base
    assert derive_cache_key('en', 'es', 'hello') != base


def test_key_layout():
    assert derive_cache_key('', 'es', 'Hello, world!') == 'translate::es:Hello, world!'
    assert derive_cache_key('en', 'es', 'a:b') == 'translate:en:es:a:b'
