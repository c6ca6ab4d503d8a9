"""
에러 정의
HTTP 응답 코드가 정해진 프록시 예외들
"""
from typing import Optional


class LawProxyError(Exception):
    """프록시 예외의 기본 클래스. 응답 본문은 {error, details?} 형태"""
    status_code = 500

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        body = {"error": self.message}
        if self.details:
            body["details"] = self.details
        return body


class InvalidQueryError(LawProxyError):
    """클라이언트 입력 오류 (검색어 누락, 지원하지 않는 target)"""
    status_code = 400


class MissingCredentialError(LawProxyError):
    """서버 설정 오류 (LAW_API_KEY 누락)"""
    status_code = 500


class UpstreamAnomalyError(LawProxyError):
    """상위 API가 XML 대신 HTML 등 예상치 못한 응답을 반환한 경우"""
    status_code = 500
