"""
Health Service - 헬스 체크 비즈니스 로직
"""
from ..config.settings import ProxySettings
from ..repositories.base import BaseLawRepository


class HealthService:
    """헬스 체크 관련 비즈니스 로직을 처리하는 Service"""

    def __init__(self, settings: ProxySettings):
        self.settings = settings

    async def check_health(self) -> dict:
        """헬스 체크 - API 키 및 수집 방식 설정 상태 확인"""
        api_key = self.settings.api_key
        configured = not BaseLawRepository.is_placeholder_key(api_key)

        # 설정이 빠져 있어도 200을 반환하여 프로세스가 살아있음을 알림
        return {
            "status": "ok" if configured else "degraded",
            "environment": {
                "law_api_key": {
                    "configured": configured,
                    "length": len(api_key),
                    "preview": BaseLawRepository.mask_api_key(api_key) if configured else None,
                    "usage": "국가법령정보센터 API의 OC 파라미터로 사용됩니다.",
                },
                "request_timeout": self.settings.request_timeout,
                "enrichment_strategy": self.settings.enrichment_strategy.value,
                "display": self.settings.display,
                "api_ready": configured,
            },
            "message": "법령 검색 프록시가 정상적으로 실행 중입니다.",
        }
