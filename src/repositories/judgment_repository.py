"""
Judgment Repository - 판례 전문(판결문) 조회 (lawService.do)
두 가지 수집 방식을 제공: TEXT 응답 그대로 사용 / 상세 HTML 페이지에서 본문 추출
"""
from abc import ABC, abstractmethod
from typing import Dict
from urllib.parse import urlencode

from .base import BaseLawRepository, logger, LAW_API_BASE_URL
from ..config.settings import ProxySettings
from ..models import EnrichmentStrategy
from ..utils.html_extractor import extract_text, is_html_document

FULL_TEXT_UNAVAILABLE = "판결문 전문을 가져올 수 없습니다."
FULL_TEXT_HTML_ERROR = "판결문 전문을 가져오는 중 오류 발생 (API 응답 문제)."
FULL_TEXT_EMPTY = "판결문 전문 내용이 없습니다."
FULL_TEXT_NOT_FOUND = "판결문 본문을 찾을 수 없습니다."
FULL_TEXT_FAILED = "판결문 전문을 가져오는 데 실패했습니다: {}"


class JudgmentRepository(BaseLawRepository, ABC):
    """판결문 전문 조회의 공통 부분"""

    strategy: EnrichmentStrategy

    def detail_link(self, precedent_id: str) -> str:
        """판례 상세 HTML 링크"""
        params = self.build_params(target="prec", ID=precedent_id, type="HTML")
        return f"{LAW_API_BASE_URL}?{urlencode(params)}"

    @abstractmethod
    def fetch_full_text(self, precedent_id: str, link: str) -> str:
        """판결문 전문을 가져옵니다. 네트워크/HTTP 오류는 그대로 올립니다."""


class JudgmentTextRepository(JudgmentRepository):
    """lawService.do type=TEXT 응답 본문을 그대로 전문으로 사용"""

    strategy = EnrichmentStrategy.TEXT

    def fetch_full_text(self, precedent_id: str, link: str) -> str:
        params = self.build_params(target="prec", ID=precedent_id, type="TEXT")
        response = self.http_get(LAW_API_BASE_URL, params)
        response.raise_for_status()

        body = response.text or ""
        if is_html_document(body):
            logger.warning("2단계: 상세 판례 API (ID: %s)가 HTML 오류 페이지를 반환했습니다.", precedent_id)
            return FULL_TEXT_HTML_ERROR
        body = body.strip()
        return body or FULL_TEXT_EMPTY


class JudgmentPageRepository(JudgmentRepository):
    """판례 상세 HTML 페이지를 받아 본문 컨테이너의 텍스트를 추출"""

    strategy = EnrichmentStrategy.HTML

    def fetch_full_text(self, precedent_id: str, link: str) -> str:
        response = self.http_get(link, params=None)
        response.raise_for_status()

        body = response.text or ""
        if not is_html_document(body):
            logger.warning("2단계: 상세 페이지 (ID: %s)가 HTML 문서가 아닙니다.", precedent_id)
            return FULL_TEXT_NOT_FOUND
        return extract_text(body) or FULL_TEXT_NOT_FOUND


JUDGMENT_REPOSITORIES: Dict[EnrichmentStrategy, type] = {
    EnrichmentStrategy.TEXT: JudgmentTextRepository,
    EnrichmentStrategy.HTML: JudgmentPageRepository,
}


def get_judgment_repository(settings: ProxySettings) -> JudgmentRepository:
    """설정된 수집 방식에 맞는 Repository 반환"""
    return JUDGMENT_REPOSITORIES[settings.enrichment_strategy](settings)
