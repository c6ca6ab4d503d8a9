"""
HTML Extractor - 판결문 상세 페이지에서 본문 텍스트 추출
선택자 규칙을 순서대로 시도하여 처음으로 텍스트가 나오는 컨테이너를 사용
"""
import re
from typing import NamedTuple, Optional, Sequence

from bs4 import BeautifulSoup


class ExtractionRule(NamedTuple):
    """본문 컨테이너 선택 규칙"""
    name: str
    selector: str


# 우선순위: 본문 영역 → 보조 본문 영역 → 문서 전체 body
DEFAULT_RULES: Sequence[ExtractionRule] = (
    ExtractionRule("content", "#contentBody"),
    ExtractionRule("fallback_content", ".pgroup"),
    ExtractionRule("body", "body"),
)

_BLANK_LINES = re.compile(r"\n{3,}")


def is_html_document(body: Optional[str]) -> bool:
    """본문이 HTML 문서 형태인지 확인합니다."""
    if not body:
        return False
    head = body.lstrip()[:1000].lower()
    return head.startswith("<!doctype html") or "<html" in head


def collapse_blank_lines(text: str) -> str:
    """연속된 빈 줄을 하나의 빈 줄로 정리"""
    lines = [line.strip() for line in text.splitlines()]
    return _BLANK_LINES.sub("\n\n", "\n".join(lines)).strip()


def extract_text(html: str, rules: Sequence[ExtractionRule] = DEFAULT_RULES) -> Optional[str]:
    """
    HTML 문서에서 본문 텍스트를 추출합니다.

    Args:
        html: HTML 문서 문자열
        rules: 시도할 선택자 규칙 (앞에서부터, 처음 매칭된 규칙 사용)

    Returns:
        정리된 본문 텍스트, 어느 규칙에도 텍스트가 없으면 None
    """
    soup = BeautifulSoup(html, "lxml")
    for tag in soup(["script", "style"]):
        tag.decompose()

    for rule in rules:
        node = soup.select_one(rule.selector)
        if node is None:
            continue
        text = collapse_blank_lines(node.get_text("\n"))
        if text:
            return text
    return None
