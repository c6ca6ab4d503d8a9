import xml.etree.ElementTree as ET
from urllib.parse import parse_qs, urlparse

import pytest
import requests

from conftest import (
    API_KEY,
    HTML_ERROR_PAGE,
    LAW_SEARCH_XML,
    SINGLE_PREC_XML,
    FakeResponse,
)
from src.models import SearchQuery, SearchTarget, UpstreamAnomalyError
from src.repositories.search_repository import LawSearchRepository, HTML_ANOMALY_ERROR, HTML_ANOMALY_DETAILS


@pytest.fixture
def repository(settings):
    return LawSearchRepository(settings)


def test_search_builds_request_and_parses_records(repository, upstream):
    records = repository.search(SearchQuery(text="담보권 실행"))

    query = parse_qs(urlparse(upstream.calls[0]).query)
    assert query == {
        "OC": [API_KEY],
        "target": ["prec"],
        "type": ["XML"],
        "query": ["담보권 실행"],
        "display": ["100"],
    }
    assert [r["판례일련번호"] for r in records] == ["228541", "228542", "228543"]
    # CDATA 내용도 텍스트로 읽힘
    assert records[0]["사건명"] == "손해배상(기)"
    assert records[0]["판시사항"] == "담보권 실행의 요건"


def test_single_item_becomes_one_element_list(repository, upstream):
    upstream.search_body = SINGLE_PREC_XML

    records = repository.search(SearchQuery(text="부당해고"))

    assert len(records) == 1
    assert records[0]["사건번호"] == "2022두1234"


def test_statute_target_uses_law_search_root(repository, upstream):
    upstream.search_body = LAW_SEARCH_XML

    records = repository.search(SearchQuery(text="근로기준법", target=SearchTarget.STATUTE))

    assert parse_qs(urlparse(upstream.calls[0]).query)["target"] == ["law"]
    assert records == [{
        "법령일련번호": "253527",
        "법령명한글": "근로기준법",
        "공포일자": "20210518",
        "공포번호": "18176",
        "법령구분명": "법률",
        "소관부처명": "고용노동부",
        "시행일자": "20211119",
        "법령상세링크": "/DRF/lawService.do?OC=x&target=law&MST=253527&type=HTML",
    }]


def test_empty_search_returns_empty_list(repository, upstream):
    upstream.search_body = "<PrecSearch><totalCnt>0</totalCnt></PrecSearch>"
    assert repository.search(SearchQuery(text="없는검색어")) == []


def test_html_response_is_anomaly(repository, upstream):
    upstream.search_body = HTML_ERROR_PAGE

    with pytest.raises(UpstreamAnomalyError) as ei:
        repository.search(SearchQuery(text="담보권"))

    assert ei.value.status_code == 500
    assert ei.value.to_dict() == {"error": HTML_ANOMALY_ERROR, "details": HTML_ANOMALY_DETAILS}


def test_unexpected_xml_root_is_anomaly(repository, upstream):
    upstream.search_body = "<Law>사용자 정보 검증에 실패하였습니다.</Law>"

    with pytest.raises(UpstreamAnomalyError) as ei:
        repository.search(SearchQuery(text="담보권"))

    assert ei.value.details == "사용자 정보 검증에 실패하였습니다."


def test_broken_xml_raises_parse_error(repository, upstream):
    upstream.search_body = "<PrecSearch><prec>"

    with pytest.raises(ET.ParseError):
        repository.search(SearchQuery(text="담보권"))


def test_http_error_is_raised(repository, monkeypatch):
    monkeypatch.setattr(
        requests, "get",
        lambda url, params=None, timeout=None: FakeResponse("<PrecSearch/>", url=url, status_code=503),
    )

    with pytest.raises(requests.exceptions.HTTPError):
        repository.search(SearchQuery(text="담보권"))


def test_masked_url_hides_api_key(repository):
    url = f"https://www.law.go.kr/DRF/lawSearch.do?OC={API_KEY}&target=prec"
    masked = repository.masked_url(url)
    assert API_KEY not in masked
    assert "abcd****5678" in masked
