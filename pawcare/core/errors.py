"""
pawcare.core.errors - 도메인 예외 계층.

모든 도메인 예외는 PawCareError를 상속하므로 호출자는 넓게 또는 좁게 잡을 수 있습니다.
각 예외는 API 응답에 그대로 사용할 error_code와 사용자 표시용 message를 가집니다.
"""


class PawCareError(Exception):
    """모든 도메인 예외의 기반 클래스."""
    error_code = "PAWCARE_ERROR"
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error_code": self.error_code, "message": self.message}


class DataValidationError(PawCareError):
    """빈 필수 텍스트, 범위를 벗어난 숫자 등 입력값이 도메인 규칙을 위반한 경우."""
    error_code = "VALIDATION_ERROR"
    status_code = 400


class NotFoundError(PawCareError):
    """수정/삭제 대상 ID가 저장소에 존재하지 않는 경우."""
    error_code = "NOT_FOUND"
    status_code = 404


class AuthenticationError(PawCareError):
    """시뮬레이션 인증에서 자격 증명이 거부된 경우."""
    error_code = "AUTHENTICATION_FAILED"
    status_code = 401
