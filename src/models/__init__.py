"""Models - 요청/응답 스키마 및 에러 정의"""
from .schemas import SearchTarget, EnrichmentStrategy, SearchQuery, CaseRecord, StatuteRecord
from .errors import LawProxyError, InvalidQueryError, MissingCredentialError, UpstreamAnomalyError

__all__ = [
    "SearchTarget",
    "EnrichmentStrategy",
    "SearchQuery",
    "CaseRecord",
    "StatuteRecord",
    "LawProxyError",
    "InvalidQueryError",
    "MissingCredentialError",
    "UpstreamAnomalyError",
]
