import pytest

from app.errors import Unauthorized
from app.utils.auth import authenticate, require_token


class TestAuthenticate:

    def test_open_deployment_allows_anything(self):
        assert authenticate('', '')
        assert authenticate('whatever', '')
        assert authenticate(None, None)

    def test_matching_token_allowed(self):
        assert authenticate('s3cret', 's3cret')

    def test_mismatched_token_rejected(self):
        assert not authenticate('wrong', 's3cret')
        assert not authenticate('', 's3cret')
        assert not authenticate(None, 's3cret')

    def test_comparison_is_exact(self):
        assert not authenticate('S3CRET', 's3cret')
        assert not authenticate('s3cret ', 's3cret')


class TestRequireToken:

    def test_raises_unauthorized(self):
        with pytest.raises(Unauthorized) as exc_info:
            require_token('wrong', 's3cret')
        assert exc_info.value.status_code == 401

    def test_rejection_does_not_log_token(self, caplog):
        with pytest.raises(Unauthorized):
            require_token('leaky-token-value', 's3cret')
        assert 'leaky-token-value' not in caplog.text

    def test_passes_silently_when_allowed(self):
        require_token('s3cret', 's3cret')
        require_token('', '')
