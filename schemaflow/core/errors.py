"""
서비스 계층 에러 정의

저장소/서비스에서 발생한 오류를 코드별로 분류하여 상위 API 계층에 전달한다.
"""

import enum

from sqlalchemy.exc import IntegrityError, SQLAlchemyError


class ErrorCode(str, enum.Enum):
    """에러 분류"""
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INVALID = "invalid"
    FORBIDDEN = "forbidden"
    INTERNAL = "internal"


# ErrorCode → HTTP 상태 코드
HTTP_STATUS = {
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.CONFLICT: 409,
    ErrorCode.INVALID: 400,
    ErrorCode.FORBIDDEN: 403,
    ErrorCode.INTERNAL: 500,
}


class StoreError(Exception):
    """코드가 부여된 서비스 오류"""

    def __init__(self, code: ErrorCode, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    @property
    def status_code(self) -> int:
        return HTTP_STATUS.get(self.code, 500)

    def __repr__(self) -> str:
        return f"<StoreError(code={self.code.value}, message='{self.message}')>"


def not_found(message: str) -> StoreError:
    return StoreError(ErrorCode.NOT_FOUND, message)


def conflict(message: str) -> StoreError:
    return StoreError(ErrorCode.CONFLICT, message)


def format_error(exc: Exception) -> StoreError:
    """DB 예외를 StoreError로 변환"""
    if isinstance(exc, StoreError):
        return exc
    if isinstance(exc, IntegrityError):
        return StoreError(ErrorCode.CONFLICT, f"제약 조건 위반: {exc.orig}")
    if isinstance(exc, SQLAlchemyError):
        return StoreError(ErrorCode.INTERNAL, f"DB 오류: {exc}")
    return StoreError(ErrorCode.INTERNAL, str(exc))
