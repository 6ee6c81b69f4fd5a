"""
外部画像补全客户端单元测试
"""

from unittest.mock import Mock

import pytest
import requests

from resume_engine.errors import ValidationError
from resume_engine.services.enrichment_service import ProfileEnrichmentClient


@pytest.fixture
def http():
    session = Mock()
    response = Mock()
    response.json.return_value = {"person": {"firstName": "Kevin"}}
    response.raise_for_status.return_value = None
    session.get.return_value = response
    return session


class TestProfileEnrichmentClient:
    """测试 ProfileEnrichmentClient"""

    def test_fetch_profile_passthrough(self, http):
        """测试原样返回第三方 JSON"""
        client = ProfileEnrichmentClient(api_url="https://enrich.test/profile", api_key="key", http=http)

        payload = client.fetch_profile(" https://www.linkedin.com/in/kevin ")

        assert payload == {"person": {"firstName": "Kevin"}}
        http.get.assert_called_once_with(
            "https://enrich.test/profile",
            params={"apikey": "key", "linkedinUrl": "https://www.linkedin.com/in/kevin"},
            timeout=30
        )

    def test_api_key_from_env(self, monkeypatch, http):
        """测试 API Key 从环境变量读取"""
        monkeypatch.setenv("ENRICHMENT_API_KEY", "env-key")

        client = ProfileEnrichmentClient(http=http)

        assert client.api_key == "env-key"

    def test_missing_api_key(self, monkeypatch, http):
        """测试未配置 API Key"""
        monkeypatch.delenv("ENRICHMENT_API_KEY", raising=False)
        client = ProfileEnrichmentClient(http=http)

        with pytest.raises(ValueError):
            client.fetch_profile("https://www.linkedin.com/in/kevin")
        http.get.assert_not_called()

    def test_empty_profile_url(self, http):
        """测试空 URL"""
        client = ProfileEnrichmentClient(api_key="key", http=http)

        with pytest.raises(ValidationError):
            client.fetch_profile("  ")

    def test_http_error_propagates(self, http):
        """测试非 2xx 响应向上抛出"""
        http.get.return_value.raise_for_status.side_effect = requests.HTTPError("404")
        client = ProfileEnrichmentClient(api_key="key", http=http)

        with pytest.raises(requests.HTTPError):
            client.fetch_profile("https://www.linkedin.com/in/ghost")
