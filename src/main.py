#!/usr/bin/env python3
"""
법령 검색 프록시 서버
국가법령정보센터(law.go.kr) DRF API 검색 결과를 JSON으로 정규화하여 제공

레이어드 아키텍처 적용:
- Routes → Services → Repositories
"""
import sys
import os
from typing import Optional
from fastapi import FastAPI
from .config.settings import setup_logging, get_api, load_settings, ProxySettings
from .services.search_service import SearchService
from .services.health_service import HealthService
from .routes.http_routes import register_http_routes

# 로깅 설정
logger = setup_logging()


def create_app(settings: Optional[ProxySettings] = None) -> FastAPI:
    """설정을 주입하여 FastAPI 앱 생성"""
    settings = settings or load_settings()

    api = get_api()

    # Service 인스턴스 생성
    search_service = SearchService(settings)
    health_service = HealthService(settings)

    # Routes 등록
    register_http_routes(api, search_service, health_service)
    return api


# FastAPI 앱 초기화
api = create_app()


if __name__ == "__main__":
    import uvicorn
    import logging
    import atexit

    port = int(os.environ.get('PORT', 8099))

    print("법령 검색 프록시 시작 중...", file=sys.stderr)
    print(f"포트: {port}", file=sys.stderr)
    print(f"검색 엔드포인트: http://localhost:{port}/api/search?query=...", file=sys.stderr)

    # 프로덕션에서는 환경 변수로 reload=False 설정
    reload = os.environ.get('RELOAD', 'true').lower() == 'true'

    # uvicorn access log 필터링: Health Check 요청 제외
    class HealthCheckFilter(logging.Filter):
        """Health Check 요청을 access log에서 필터링"""
        def filter(self, record):
            return "/health" not in record.getMessage()

    logging.getLogger("uvicorn.access").addFilter(HealthCheckFilter())

    def exit_handler():
        logger.info("🛑 서버 종료 완료")

    atexit.register(exit_handler)

    config = uvicorn.Config(
        "src.main:api",
        host="0.0.0.0",
        port=port,
        reload=reload,
        log_level="info",
        access_log=True,
    )
    server = uvicorn.Server(config)
    server.run()
