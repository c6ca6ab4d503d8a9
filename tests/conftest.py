import sys
import time
from pathlib import Path
from urllib.parse import urlencode, urlparse, parse_qs

# 프로젝트 루트 경로를 sys.path에 추가
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest
import requests

from src.config.settings import ProxySettings
from src.repositories.base import LAW_API_BASE_URL, LAW_API_SEARCH_URL

API_KEY = "abcd1234efgh5678"

PREC_SEARCH_XML = """<?xml version="1.0" encoding="UTF-8"?>
<PrecSearch>
  <target>prec</target>
  <키워드>담보권</키워드>
  <totalCnt>3</totalCnt>
  <page>1</page>
  <prec id="1">
    <판례일련번호>228541</판례일련번호>
    <사건명><![CDATA[손해배상(기)]]></사건명>
    <사건번호>2020다12345</사건번호>
    <선고일자>2021.03.25</선고일자>
    <법원명>대법원</법원명>
    <사건종류명>민사</사건종류명>
    <판시사항><![CDATA[담보권 실행의 요건]]></판시사항>
  </prec>
  <prec id="2">
    <판례일련번호>228542</판례일련번호>
    <사건명><![CDATA[근저당권말소]]></사건명>
    <사건번호>2019다56789</사건번호>
    <선고일자>2020.11.12</선고일자>
    <법원명>대법원</법원명>
    <사건종류명>민사</사건종류명>
  </prec>
  <prec id="3">
    <판례일련번호>228543</판례일련번호>
    <사건명><![CDATA[사해행위취소]]></사건명>
    <사건번호>2018다11111</사건번호>
  </prec>
</PrecSearch>
"""

SINGLE_PREC_XML = """<?xml version="1.0" encoding="UTF-8"?>
<PrecSearch>
  <totalCnt>1</totalCnt>
  <prec id="1">
    <판례일련번호>100001</판례일련번호>
    <사건명><![CDATA[부당해고구제재심판정취소]]></사건명>
    <사건번호>2022두1234</사건번호>
    <선고일자>2023.01.12</선고일자>
    <법원명>대법원</법원명>
    <사건종류명>일반행정</사건종류명>
  </prec>
</PrecSearch>
"""

LAW_SEARCH_XML = """<?xml version="1.0" encoding="UTF-8"?>
<LawSearch>
  <target>law</target>
  <totalCnt>1</totalCnt>
  <law id="1">
    <법령일련번호>253527</법령일련번호>
    <법령명한글><![CDATA[근로기준법]]></법령명한글>
    <공포일자>20210518</공포일자>
    <공포번호>18176</공포번호>
    <법령구분명>법률</법령구분명>
    <소관부처명>고용노동부</소관부처명>
    <시행일자>20211119</시행일자>
    <법령상세링크>/DRF/lawService.do?OC=x&amp;target=law&amp;MST=253527&amp;type=HTML</법령상세링크>
  </law>
</LawSearch>
"""

HTML_ERROR_PAGE = """<!DOCTYPE html>
<html><head><title>오류</title></head><body>사용자 정보 검증에 실패하였습니다.</body></html>
"""


class FakeResponse:
    """requests.Response 대용"""

    def __init__(self, text: str, url: str = "", status_code: int = 200, content_type: str = "text/xml;charset=UTF-8"):
        self.text = text
        self.content = text.encode("utf-8")
        self.url = url
        self.status_code = status_code
        self.headers = {"Content-Type": content_type}

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error for url: {self.url}")


class FakeUpstream:
    """
    lawSearch.do / lawService.do 를 흉내내는 가짜 requests.get

    details: 판례일련번호 -> 본문 문자열 또는 예외
    delays: 판례일련번호 -> 응답 지연(초)
    """

    def __init__(self, search_body: str = PREC_SEARCH_XML):
        self.search_body = search_body
        self.details = {}
        self.delays = {}
        self.calls = []

    def __call__(self, url, params=None, timeout=None):
        full_url = f"{url}?{urlencode(params)}" if params else url
        self.calls.append(full_url)

        if url == LAW_API_SEARCH_URL:
            return FakeResponse(self.search_body, url=full_url)

        if url.startswith(LAW_API_BASE_URL):
            query = parse_qs(urlparse(full_url).query)
            precedent_id = query["ID"][0]
            delay = self.delays.get(precedent_id)
            if delay:
                time.sleep(delay)
            body = self.details.get(precedent_id, f"판결문 {precedent_id} 전문")
            if isinstance(body, Exception):
                raise body
            content_type = "text/html;charset=UTF-8" if query["type"][0] == "HTML" else "text/plain;charset=UTF-8"
            return FakeResponse(body, url=full_url, content_type=content_type)

        raise AssertionError(f"unexpected url: {url}")

    @property
    def detail_calls(self):
        return [call for call in self.calls if call.startswith(LAW_API_BASE_URL)]


@pytest.fixture
def settings():
    return ProxySettings(api_key=API_KEY)


@pytest.fixture
def html_settings():
    return ProxySettings(api_key=API_KEY, enrichment_strategy="html")


@pytest.fixture
def upstream(monkeypatch):
    fake = FakeUpstream()
    monkeypatch.setattr(requests, "get", fake)
    return fake
