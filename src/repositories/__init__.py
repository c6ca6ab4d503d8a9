"""Repository 레이어 - 데이터 접근 로직"""
from .base import BaseLawRepository
from .search_repository import LawSearchRepository
from .judgment_repository import (
    JudgmentRepository,
    JudgmentTextRepository,
    JudgmentPageRepository,
    get_judgment_repository,
)

__all__ = [
    "BaseLawRepository",
    "LawSearchRepository",
    "JudgmentRepository",
    "JudgmentTextRepository",
    "JudgmentPageRepository",
    "get_judgment_repository",
]
