# pdnagios/application/services/validation.py
from __future__ import annotations

import logging

from pdnagios.domain.errors import (
    InvalidNotificationTypeError,
    InvalidSourceTypeError,
    MissingConditionalFieldError,
    MissingFlagsError,
)
from pdnagios.domain.notification import CustomField, NotificationInput
from pdnagios.domain.notification_type import NotificationType, SourceType

logger = logging.getLogger(__name__)


# PROBLEM 이 아닌 알림에서 source-type 별로 반드시 있어야 하는 custom field (검사 순서 고정)
REQUIRED_FIELDS: dict[SourceType, tuple[CustomField, ...]] = {
    SourceType.HOST: (
        CustomField.HOSTNAME,
        CustomField.HOSTSTATE,
    ),
    SourceType.SERVICE: (
        CustomField.HOSTNAME,
        CustomField.SERVICEDESC,
        CustomField.SERVICESTATE,
    ),
}


def _missing_flags(notification: NotificationInput) -> list[str]:
    flags = {
        "service-key": notification.service_key,
        "notification-type": notification.notification_type,
        "source-type": notification.source_type,
    }
    return [name for name, value in flags.items() if not value]


def validate(notification: NotificationInput) -> None:
    """
    입력 플래그 검증. 첫 번째로 어긋난 규칙에서 바로 예외를 던진다.

    검사 순서:
      1) 필수 플래그 (빠진 것 전부를 한 번에)
      2) notification-type enum
      3) source-type enum
      4) PROBLEM 이 아닐 때 source-type 별 custom field

    Raises:
        MissingFlagsError, InvalidNotificationTypeError,
        InvalidSourceTypeError, MissingConditionalFieldError
    """
    missing = _missing_flags(notification)
    if missing:
        raise MissingFlagsError(missing)

    try:
        notification_type = NotificationType(notification.notification_type)
    except ValueError:
        raise InvalidNotificationTypeError() from None

    try:
        source_type = SourceType(notification.source_type)
    except ValueError:
        raise InvalidSourceTypeError() from None

    # PROBLEM 은 custom field 없이도 trigger 가능
    if notification_type is NotificationType.PROBLEM:
        return

    for field in REQUIRED_FIELDS[source_type]:
        if not notification.get_field(field):
            logger.debug(
                "Missing %s for %s notification (source_type=%s)",
                field.value,
                notification_type.value,
                source_type.value,
            )
            raise MissingConditionalFieldError(field.value, source_type.value)
