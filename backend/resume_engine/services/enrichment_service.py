"""
外部画像补全服务客户端

给定外部个人主页 URL，返回第三方原始 JSON，由调用方自行映射为导入请求。
API Key 只从环境变量读取。
"""

import logging
from typing import Any, Dict, Optional

import requests

from resume_engine.config import get_enrichment_api_key, get_enrichment_api_url
from resume_engine.errors import ValidationError

logger = logging.getLogger(__name__)


class ProfileEnrichmentClient:
    """画像补全客户端（原样透传第三方数据）"""

    def __init__(
        self,
        api_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: float = 30,
        http: Optional[requests.Session] = None
    ):
        """
        Args:
            api_url: 服务地址，为 None 时读取 ENRICHMENT_API_URL
            api_key: API Key，为 None 时读取 ENRICHMENT_API_KEY
            timeout: 请求超时（秒）
            http: requests 会话（测试时可注入）
        """
        self.api_url = api_url or get_enrichment_api_url()
        self.api_key = api_key or get_enrichment_api_key()
        self.timeout = timeout
        self.http = http or requests.Session()

    def fetch_profile(self, profile_url: str) -> Dict[str, Any]:
        """
        拉取外部画像

        Args:
            profile_url: 外部个人主页 URL

        Returns:
            第三方返回的原始 JSON

        Raises:
            ValueError: 未配置 ENRICHMENT_API_KEY
            ValidationError: profile_url 为空
            requests.RequestException: 网络错误或非 2xx 响应
        """
        if not self.api_key:
            raise ValueError("环境变量 'ENRICHMENT_API_KEY' 未设置或为空，无法调用画像补全服务")
        if not profile_url or not profile_url.strip():
            raise ValidationError("profile_url 不能为空")

        response = self.http.get(
            self.api_url,
            params={"apikey": self.api_key, "linkedinUrl": profile_url.strip()},
            timeout=self.timeout
        )
        response.raise_for_status()
        logger.info("Fetched external profile for %s", profile_url)
        return response.json()
