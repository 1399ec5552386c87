"""
Unit tests for the APIKey credential.
"""

import dataclasses

import pytest
from requests.auth import HTTPBasicAuth

from toggl_client.api.authentication import API_SECRET, APIKey


class TestAPIKey:
    """Test suite for APIKey"""

    @pytest.mark.unit
    def test_default_secret_follows_toggl_convention(self):
        key = APIKey(token="abc123")
        assert key.secret == API_SECRET == "api_token"

    @pytest.mark.unit
    def test_to_auth(self):
        auth = APIKey(token="abc123", secret="s3cret").to_auth()
        assert isinstance(auth, HTTPBasicAuth)
        assert auth.username == "abc123"
        assert auth.password == "s3cret"

    @pytest.mark.unit
    def test_is_immutable(self):
        key = APIKey(token="abc123")
        with pytest.raises(dataclasses.FrozenInstanceError):
            key.token = "other"

    @pytest.mark.unit
    def test_empty_token_rejected(self):
        with pytest.raises(ValueError):
            APIKey(token="")

    @pytest.mark.unit
    def test_repr_masks_credentials(self):
        key = APIKey(token="1971800d4d82861d8f2c1651fea4d212", secret="topsecretvalue")
        text = repr(key)
        assert "1971800d4d82861d8f2c1651fea4d212" not in text
        assert "topsecretvalue" not in text
