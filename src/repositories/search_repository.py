"""
Search Repository - 판례/법령 목록 검색 (lawSearch.do)
"""
import xml.etree.ElementTree as ET
from typing import Dict, List

from .base import BaseLawRepository, logger, LAW_API_SEARCH_URL
from ..models import SearchQuery, SearchTarget, UpstreamAnomalyError

# target별 XML 루트 태그와 항목 태그
SEARCH_ROOTS = {
    SearchTarget.PRECEDENT: ("PrecSearch", "prec"),
    SearchTarget.STATUTE: ("LawSearch", "law"),
}

HTML_ANOMALY_ERROR = "국가법령정보 API 오류: 예상치 못한 HTML 응답 (목록 검색)"
HTML_ANOMALY_DETAILS = "API 키가 유효하지 않거나, 요청이 잘못되었을 수 있습니다. 법제처에 문의하여 API 키를 확인해주세요."
XML_ANOMALY_ERROR = "국가법령정보 API 오류: 예상치 못한 XML 응답 (목록 검색)"


def element_to_record(elem: ET.Element) -> Dict[str, str]:
    """XML 항목 하나를 {태그: 텍스트} 딕셔너리로 변환 (CDATA 포함)"""
    record = {}
    for child in elem:
        record[child.tag] = (child.text or "").strip()
    return record


class LawSearchRepository(BaseLawRepository):
    """목록 검색 관련 기능을 담당하는 Repository"""

    def search(self, query: SearchQuery) -> List[Dict[str, str]]:
        """
        lawSearch.do를 호출하여 검색 결과 원본 레코드 목록을 반환합니다.

        Args:
            query: 검색어와 검색 대상

        Returns:
            상위 API 필드명(한글)을 키로 하는 레코드 리스트 (검색 결과 순서 유지)

        Raises:
            UpstreamAnomalyError: HTML 또는 예상치 못한 XML이 반환된 경우
            requests.exceptions.RequestException: 네트워크/HTTP 오류
        """
        root_tag, item_tag = SEARCH_ROOTS[query.target]
        params = self.build_params(
            target=query.target.value,
            type="XML",
            query=query.text,
            display=self.settings.display,
        )

        response = self.http_get(LAW_API_SEARCH_URL, params)
        logger.info("1단계: 목록 검색 호출 | target=%s url=%s", query.target.value, self.masked_url(response.url))

        result = self.classify_xml_response(response, root_tag)
        if not result.ok:
            if result.anomaly["error_code"] == "API_ERROR_HTML":
                logger.error("1단계: 국가법령정보 API가 HTML 오류 페이지를 반환했습니다. API 키 또는 요청을 확인하세요.")
                raise UpstreamAnomalyError(HTML_ANOMALY_ERROR, HTML_ANOMALY_DETAILS)
            raise UpstreamAnomalyError(XML_ANOMALY_ERROR, result.anomaly["message"] or None)
        response.raise_for_status()

        records = [element_to_record(elem) for elem in result.root.findall(item_tag)]
        logger.info("1단계: 검색된 %s 수: %d", "판례" if query.target == SearchTarget.PRECEDENT else "법령", len(records))
        return records
