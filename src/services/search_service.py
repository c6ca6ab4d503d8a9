"""
Search Service - 검색 프록시 비즈니스 로직
1단계 목록 검색 → (판례인 경우) 2단계 판결문 전문 수집 → 정규화
"""
import asyncio
from typing import List, Optional

from ..config.settings import ProxySettings
from ..models import (
    SearchQuery,
    SearchTarget,
    CaseRecord,
    InvalidQueryError,
    MissingCredentialError,
)
from ..repositories.base import BaseLawRepository, logger, LAW_SITE_URL
from ..repositories.search_repository import LawSearchRepository
from ..repositories.judgment_repository import (
    JudgmentRepository,
    get_judgment_repository,
    FULL_TEXT_UNAVAILABLE,
    FULL_TEXT_FAILED,
)
from ..utils.result_normalizer import normalize_case, normalize_statute, CASE_FIELD_MAP

QUERY_REQUIRED = "검색어가 필요합니다."
CREDENTIAL_MISSING = "서버 설정 오류: API 키가 누락되었습니다."
UNSUPPORTED_TARGET = "지원하지 않는 검색 대상입니다."


class SearchService:
    """검색 요청을 처리하는 Service"""

    def __init__(
        self,
        settings: ProxySettings,
        search_repository: Optional[LawSearchRepository] = None,
        judgment_repository: Optional[JudgmentRepository] = None,
    ):
        self.settings = settings
        self.search_repository = search_repository or LawSearchRepository(settings)
        self.judgment_repository = judgment_repository or get_judgment_repository(settings)

    def build_query(self, query: Optional[str], target: Optional[str] = None) -> SearchQuery:
        """요청 파라미터 검증 후 SearchQuery 생성"""
        if not query or not query.strip():
            raise InvalidQueryError(QUERY_REQUIRED)
        try:
            search_target = SearchTarget(target or SearchTarget.PRECEDENT.value)
        except ValueError:
            raise InvalidQueryError(UNSUPPORTED_TARGET, f"target은 'prec' 또는 'law'만 가능합니다: {target}")
        if BaseLawRepository.is_placeholder_key(self.settings.api_key):
            logger.error("서버에 LAW_API_KEY 환경 변수가 설정되지 않았습니다.")
            raise MissingCredentialError(CREDENTIAL_MISSING)
        return SearchQuery(text=query, target=search_target)

    async def search(self, query: Optional[str], target: Optional[str] = None) -> List[dict]:
        """검색 후 정규화된 레코드(dict) 리스트 반환"""
        search_query = self.build_query(query, target)
        raw_records = await asyncio.to_thread(self.search_repository.search, search_query)

        if search_query.target == SearchTarget.STATUTE:
            records = [normalize_statute(raw, LAW_SITE_URL) for raw in raw_records]
        else:
            records = await self.enrich_cases(raw_records)
        return [record.model_dump() for record in records]

    async def enrich_cases(self, raw_records: List[dict]) -> List[CaseRecord]:
        """판례마다 판결문 전문을 동시에 가져옵니다 (결과 순서는 검색 순서 유지)"""
        logger.debug("2단계: 판결문 전문 수집 | strategy=%s count=%d",
                     self.judgment_repository.strategy.value, len(raw_records))
        return list(await asyncio.gather(*(self.enrich_case(raw) for raw in raw_records)))

    async def enrich_case(self, raw: dict) -> CaseRecord:
        """판례 하나의 전문 수집. 실패해도 예외를 올리지 않고 안내 문구로 대체"""
        precedent_id = (raw.get(CASE_FIELD_MAP["id"]) or "").strip()
        if not precedent_id:
            return normalize_case(raw, full_text=FULL_TEXT_UNAVAILABLE)

        link = self.judgment_repository.detail_link(precedent_id)
        try:
            full_text = await asyncio.to_thread(self.judgment_repository.fetch_full_text, precedent_id, link)
        except Exception as e:
            logger.warning("2단계: 판례 전문 수집 실패 (ID: %s): %s", precedent_id, str(e))
            full_text = FULL_TEXT_FAILED.format(str(e))
        return normalize_case(raw, full_text=full_text, link=link)

