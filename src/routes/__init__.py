"""Routes 레이어 - HTTP 엔드포인트"""
from .http_routes import register_http_routes

__all__ = ["register_http_routes"]
