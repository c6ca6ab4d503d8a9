"""
Base Repository - 공통 유틸리티 및 상수
"""
import logging
import requests
import xml.etree.ElementTree as ET
from typing import NamedTuple, Optional

from ..config.settings import LOGGER_NAME, ProxySettings
from ..utils.html_extractor import is_html_document

logger = logging.getLogger(LOGGER_NAME)

# 국가법령정보센터 API 기본 URL
LAW_API_BASE_URL = "https://www.law.go.kr/DRF/lawService.do"  # 상세 조회용
LAW_API_SEARCH_URL = "https://www.law.go.kr/DRF/lawSearch.do"  # 목록 검색용
LAW_SITE_URL = "https://www.law.go.kr"


class DrfResult(NamedTuple):
    """DRF 응답 판별 결과: root(정상 XML) 또는 anomaly(진단 정보) 중 하나만 채워짐"""
    root: Optional[ET.Element] = None
    anomaly: Optional[dict] = None

    @property
    def ok(self) -> bool:
        return self.anomaly is None


class BaseLawRepository:
    """DRF Repository의 기본 클래스 - 공통 유틸리티 메서드"""

    def __init__(self, settings: ProxySettings):
        self.settings = settings

    @staticmethod
    def is_placeholder_key(api_key: Optional[str]) -> bool:
        """API 키가 비어 있거나 placeholder인지 확인합니다."""
        if not api_key or not isinstance(api_key, str):
            return True
        normalized = api_key.strip().lower()
        if not normalized:
            return True
        placeholders = {
            "your_api_key",
            "your_law_api_key",
            "change_me",
            "placeholder",
            "dummy",
            "none",
            "null",
        }
        return normalized in placeholders or normalized.startswith("your_")

    @staticmethod
    def mask_api_key(api_key: Optional[str]) -> str:
        """API 키를 마스킹(앞4+뒤4)하여 반환합니다."""
        if not api_key or not isinstance(api_key, str):
            return ""
        key = api_key.strip()
        if len(key) <= 8:
            return key[:2] + "****" + key[-2:]
        return key[:4] + "****" + key[-4:]

    def build_params(self, **params) -> dict:
        """OC(API 키)를 포함한 DRF 요청 파라미터를 만듭니다."""
        return {"OC": self.settings.api_key, **params}

    def masked_url(self, url: str) -> str:
        """로그용 URL (OC 값 마스킹)"""
        api_key = self.settings.api_key
        if not api_key:
            return url
        return url.replace(api_key, self.mask_api_key(api_key))

    def classify_xml_response(self, response, expected_root: str) -> DrfResult:
        """
        DRF XML 응답을 검증하여 DrfResult로 반환합니다.

        HTML 문서이거나 루트 태그가 expected_root가 아니면 anomaly를 채웁니다.
        XML 자체가 깨진 경우에는 ET.ParseError를 그대로 올립니다.
        """
        content_type = response.headers.get("Content-Type", "")
        body = response.text or ""

        if is_html_document(body):
            snippet = " ".join(body.strip().split())[:200]
            logger.warning(
                "DRF returned HTML | url=%s status=%s ct=%s snippet=%r",
                self.masked_url(response.url),
                response.status_code,
                content_type,
                snippet,
            )
            return DrfResult(anomaly={
                "error_code": "API_ERROR_HTML",
                "content_type": content_type,
                "short_snippet": snippet,
            })

        root = ET.fromstring(response.content)
        if root.tag != expected_root:
            message = " ".join("".join(root.itertext()).split())
            logger.warning("DRF returned unexpected XML root | root=%s message=%r", root.tag, message[:200])
            return DrfResult(anomaly={
                "error_code": "API_ERROR_XML",
                "root": root.tag,
                "message": message,
            })
        return DrfResult(root=root)

    def http_get(self, url: str, params: dict):
        """DRF GET 요청 (타임아웃 미설정 시 requests 기본값)"""
        response = requests.get(url, params=params, timeout=self.settings.request_timeout)
        logger.debug("DRF response | url=%s status=%s", self.masked_url(response.url), response.status_code)
        return response
