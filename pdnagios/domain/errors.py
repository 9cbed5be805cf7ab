# pdnagios/domain/errors.py
"""
enqueue 과정에서 발생하는 에러 정의

모든 에러는 EnqueueError 를 상속하고, main 에서 한 번에 잡아서
stderr 출력 + non-zero exit 로 처리한다.
"""
from __future__ import annotations

from typing import Iterable, Optional


class EnqueueError(Exception):
    """pd-nagios 에러의 공통 부모"""


class ConfigError(EnqueueError):
    """설정값이 잘못된 경우"""


class ValidationFailure(EnqueueError):
    """입력 플래그 검증 실패"""


class MissingFlagsError(ValidationFailure):
    """
    필수 플래그가 하나 이상 비어 있음.

    빠진 플래그를 한꺼번에 (정렬해서) 보여준다.
    ex) required flag(s) "notification-type", "service-key" not set
    """

    def __init__(self, flags: Iterable[str]):
        self.flags = tuple(sorted(flags))
        quoted = ", ".join(f'"{flag}"' for flag in self.flags)
        super().__init__(f"required flag(s) {quoted} not set")


class InvalidNotificationTypeError(ValidationFailure):
    def __init__(self):
        super().__init__(
            "notification-type must be one of PROBLEM, ACKNOWLEDGEMENT, RECOVERY"
        )


class InvalidSourceTypeError(ValidationFailure):
    def __init__(self):
        super().__init__('source-type must be either "host" or "service"')


class MissingConditionalFieldError(ValidationFailure):
    """
    PROBLEM 이 아닌 알림에서 source-type 별 필수 custom field 가 빠짐.
    """

    def __init__(self, field: str, source_type: str):
        self.field = field
        self.source_type = source_type
        super().__init__(
            f'the {field} field must be set for source-type "{source_type}" using the -f flag'
        )


class SubmitError(EnqueueError):
    """
    events endpoint 호출 실패 (네트워크 에러 또는 non-2xx 응답).

    원래 예외는 __cause__ 로 연결된다.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)
