"""
Pydantic 모델 정의
검색 요청과 정규화된 결과 스키마
"""
from enum import Enum
from pydantic import BaseModel, Field


class SearchTarget(str, Enum):
    """검색 대상 (DRF target 파라미터 값)"""
    PRECEDENT = "prec"  # 판례
    STATUTE = "law"  # 법령


class EnrichmentStrategy(str, Enum):
    """판결문 전문 수집 방식"""
    TEXT = "text"  # lawService.do type=TEXT 본문 그대로 사용
    HTML = "html"  # 상세 HTML 페이지에서 본문 추출


class SearchQuery(BaseModel):
    """검색 요청 모델"""
    text: str = Field(..., description="검색어 (그대로 상위 API에 전달)")
    target: SearchTarget = Field(SearchTarget.PRECEDENT, description="검색 대상: 'prec'(판례) 또는 'law'(법령)")


# 판례 관련 모델
class CaseRecord(BaseModel):
    """정규화된 판례 검색 결과"""
    id: str = "ID 없음"
    caseNumber: str = "번호 없음"
    title: str = "제목 없음"
    courtName: str = "법원 없음"
    caseType: str = "종류 없음"
    decisionDate: str = "날짜 없음"
    summary: str = "요약 정보 없음"
    fullText: str = "상세 정보 없음"
    link: str = "링크 없음"


# 법령 관련 모델
class StatuteRecord(BaseModel):
    """정규화된 법령 검색 결과"""
    id: str = "ID 없음"
    title: str = "제목 없음"
    department: str = "소관부처 없음"
    lawType: str = "종류 없음"
    promulgationNumber: str = "공포번호 없음"
    date: str = "날짜 없음"
    effectiveDate: str = "시행일자 없음"
    link: str = "링크 없음"
