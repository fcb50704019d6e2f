"""
Health check tests
==================
/health reflects Redis only; the provider is never consulted.
"""

from app.errors import ProviderError


class TestHealthEndpoints:

    def test_healthy(self, client):
        resp = client.get('/health')
        assert resp.status_code == 200
        assert resp.get_json()['status'] == 'ok'

    def test_redis_down(self, client, store):
        store.available = False
        resp = client.get('/health')
        assert resp.status_code == 503
        assert resp.get_json()['status'] == 'unavailable'

    def test_provider_not_checked(self, client, provider):
        provider.error = ProviderError('down')
        resp = client.get('/health')
        assert resp.status_code == 200
        assert provider.calls == []

    def test_post_not_allowed(self, client):
        resp = client.post('/health')
        assert resp.status_code == 405

    def test_unknown_route(self, client):
        resp = client.get('/nope')
        assert resp.status_code == 404
        assert 'error' in resp.get_json()
