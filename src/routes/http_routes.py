"""
HTTP Routes - 일반 HTTP 엔드포인트
Controller 패턴: 요청을 받아 Service를 호출
"""
import logging
from typing import Optional

from fastapi import FastAPI, Response
from fastapi.responses import JSONResponse

from ..config.settings import LOGGER_NAME
from ..models import LawProxyError, SearchTarget
from ..services.search_service import SearchService
from ..services.health_service import HealthService

logger = logging.getLogger(LOGGER_NAME)

SEARCH_PATHS = ("/api", "/api/search")

FAILURE_MESSAGES = {
    SearchTarget.PRECEDENT.value: "판례 정보를 가져오는 데 실패했습니다.",
    SearchTarget.STATUTE.value: "법령 정보를 가져오는 데 실패했습니다.",
}


def json_response(status_code: int, content: dict) -> JSONResponse:
    """상태 코드를 지정한 JSON 응답 (CORS 헤더는 미들웨어에서 추가)"""
    return JSONResponse(status_code=status_code, content=content)


def register_http_routes(api: FastAPI, search_service: SearchService, health_service: HealthService):
    """HTTP 엔드포인트 등록"""

    @api.get("/")
    async def root():
        """루트 경로 - 서버 정보"""
        return {
            "service": "Law Search Proxy",
            "status": "running",
            "endpoints": {
                "health": "/health",
                "search": "/api/search?query=<검색어>&target=prec|law",
            },
            "message": "법령 검색 프록시가 정상적으로 실행 중입니다.",
        }

    @api.get("/health")
    async def health_check():
        """HTTP GET endpoint: Health check"""
        return await health_service.check_health()

    async def search(query: Optional[str] = None, target: Optional[str] = None):
        """HTTP GET endpoint: 판례/법령 검색"""
        logger.debug("HTTP search | query=%r target=%r", query, target)
        try:
            results = await search_service.search(query, target)
        except LawProxyError as e:
            return json_response(e.status_code, e.to_dict())
        except Exception as e:
            logger.exception("백엔드 서버 내부 오류 발생: %s", str(e))
            error = FAILURE_MESSAGES.get(target or SearchTarget.PRECEDENT.value, FAILURE_MESSAGES["prec"])
            return json_response(500, {"error": error, "details": str(e)})
        return json_response(200, {"results": results})

    async def preflight():
        """CORS preflight - 요청 헤더와 무관하게 빈 본문 200"""
        return Response(status_code=200)

    for path in SEARCH_PATHS:
        api.add_api_route(path, search, methods=["GET"])
        api.add_api_route(path, preflight, methods=["OPTIONS"])
