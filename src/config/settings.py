"""
설정 관리
환경 변수 로딩, 로깅, FastAPI 앱 초기화
"""
import os
import logging
from typing import Optional
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from pydantic import BaseModel, Field
from dotenv import load_dotenv

from ..models.schemas import EnrichmentStrategy

# Load .env file
load_dotenv()

LOGGER_NAME = "law-search-proxy"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


class ProxySettings(BaseModel):
    """프록시 설정 (요청마다 읽지 않고 생성 시 주입)"""
    model_config = {"frozen": True}

    api_key: str = Field("", description="국가법령정보센터 OC 값")
    enrichment_strategy: EnrichmentStrategy = Field(
        EnrichmentStrategy.TEXT, description="판결문 전문 수집 방식: 'text' 또는 'html'"
    )
    display: int = Field(100, description="목록 검색 페이지당 결과 수", ge=1, le=100)
    request_timeout: Optional[float] = Field(None, description="HTTP 타임아웃(초), None이면 클라이언트 기본값")


def _env_number(name: str, default, cast, minimum=None, maximum=None):
    """숫자형 환경 변수를 읽고, 잘못된 값이면 경고 후 기본값 사용"""
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = cast(raw)
    except ValueError:
        logging.getLogger(LOGGER_NAME).warning("%s 값이 숫자가 아닙니다: %r (기본값 %s 사용)", name, raw, default)
        return default
    if (minimum is not None and value < minimum) or (maximum is not None and value > maximum):
        logging.getLogger(LOGGER_NAME).warning(
            "%s 값이 허용 범위(%s~%s)를 벗어났습니다: %r (기본값 %s 사용)", name, minimum, maximum, raw, default
        )
        return default
    return value


def load_settings() -> ProxySettings:
    """환경 변수에서 설정을 읽어옵니다."""
    strategy = os.environ.get("LAW_ENRICHMENT_STRATEGY", "").strip().lower() or EnrichmentStrategy.TEXT.value
    if strategy not in {s.value for s in EnrichmentStrategy}:
        logging.getLogger(LOGGER_NAME).warning(
            "LAW_ENRICHMENT_STRATEGY 값이 올바르지 않습니다: %r (기본값 text 사용)", strategy
        )
        strategy = EnrichmentStrategy.TEXT.value
    return ProxySettings(
        api_key=os.environ.get("LAW_API_KEY", "").strip(),
        enrichment_strategy=strategy,
        display=_env_number("LAW_SEARCH_DISPLAY", 100, int, minimum=1, maximum=100),
        request_timeout=_env_number("LAW_API_TIMEOUT", None, float, minimum=0.001),
    )


def setup_logging() -> logging.Logger:
    """로깅 설정"""
    logger = logging.getLogger(LOGGER_NAME)
    level = getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), logging.INFO)
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
        logger.addHandler(handler)
    logger.propagate = True
    return logger


def get_api() -> FastAPI:
    """FastAPI 앱 인스턴스 반환"""
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """서버 시작/종료 시 실행되는 lifespan 이벤트"""
        logger = logging.getLogger(LOGGER_NAME)
        logger.info("🚀 법령 검색 프록시 시작")
        yield
        logger.info("🛑 법령 검색 프록시 종료 중...")

    api = FastAPI(lifespan=lifespan)

    # 브라우저 프런트엔드에서 바로 호출할 수 있도록 모든 응답에 CORS 헤더 추가
    # (preflight 도 라우트가 직접 빈 본문 200으로 응답)
    @api.middleware("http")
    async def add_cors_headers(request: Request, call_next):
        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response

    return api
