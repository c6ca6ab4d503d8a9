"""
Result Normalizer - DRF 원본 레코드를 통일된 스키마로 변환
원본 필드가 없거나 비어 있으면 모델의 기본값(정보 없음 문구)을 사용
"""
import re
import html
from typing import Dict, Optional

from ..models import CaseRecord, StatuteRecord

# 판례 필드 매핑: 정규화 필드 -> DRF 필드
CASE_FIELD_MAP = {
    "id": "판례일련번호",
    "caseNumber": "사건번호",
    "title": "사건명",
    "courtName": "법원명",
    "caseType": "사건종류명",
    "decisionDate": "선고일자",
    "summary": "판시사항",
    "fullText": "판결요지",
}

# 법령 필드 매핑
STATUTE_FIELD_MAP = {
    "id": "법령일련번호",
    "title": "법령명한글",
    "department": "소관부처명",
    "lawType": "법령구분명",
    "promulgationNumber": "공포번호",
    "date": "공포일자",
    "effectiveDate": "시행일자",
}


def clean_html(text: str) -> str:
    """HTML 태그 및 특수문자 정리"""
    if not text:
        return ""

    # <br> 은 줄바꿈으로, 나머지 태그는 제거
    text = re.sub(r'<br\s*/?>', '\n', text, flags=re.IGNORECASE)
    text = re.sub(r'<[^>]+>', '', text)

    # HTML 엔티티 디코딩
    text = html.unescape(text)

    # 줄 단위 공백 정리
    lines = [" ".join(line.split()) for line in text.splitlines()]
    return "\n".join(line for line in lines if line).strip()


def _pick(raw: Dict[str, str], field_map: Dict[str, str]) -> Dict[str, str]:
    """비어 있지 않은 값만 골라서 반환 (나머지는 모델 기본값 사용)"""
    picked = {}
    for target, source in field_map.items():
        value = clean_html(raw.get(source) or "")
        if value:
            picked[target] = value
    return picked


def normalize_case(raw: Dict[str, str], full_text: Optional[str] = None, link: Optional[str] = None) -> CaseRecord:
    """판례 원본 레코드를 CaseRecord로 변환"""
    values = _pick(raw, CASE_FIELD_MAP)
    if full_text and full_text.strip():
        values["fullText"] = full_text.strip()
    if link:
        values["link"] = link
    return CaseRecord(**values)


def normalize_statute(raw: Dict[str, str], site_url: str) -> StatuteRecord:
    """법령 원본 레코드를 StatuteRecord로 변환"""
    values = _pick(raw, STATUTE_FIELD_MAP)
    if "id" not in values:
        law_id = (raw.get("법령ID") or "").strip()
        if law_id:
            values["id"] = law_id
    detail_link = (raw.get("법령상세링크") or "").strip()
    if detail_link:
        values["link"] = detail_link if detail_link.startswith("http") else site_url + detail_link
    return StatuteRecord(**values)
