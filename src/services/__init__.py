"""Service 레이어 - 비즈니스 로직"""
from .search_service import SearchService
from .health_service import HealthService

__all__ = ["SearchService", "HealthService"]
