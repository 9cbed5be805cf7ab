# pdnagios/domain/notification_type.py
from enum import Enum
from types import MappingProxyType


class NotificationType(str, Enum):
    """
    Nagios 알림 유형 ($NOTIFICATIONTYPE$ 매크로 값).

    - PROBLEM: 호스트/서비스에 문제가 발생
    - ACKNOWLEDGEMENT: 운영자가 문제를 인지함
    - RECOVERY: 문제가 해소됨
    """

    PROBLEM = "PROBLEM"
    ACKNOWLEDGEMENT = "ACKNOWLEDGEMENT"
    RECOVERY = "RECOVERY"


class SourceType(str, Enum):
    """알림이 host check 에서 왔는지 service check 에서 왔는지"""

    HOST = "host"
    SERVICE = "service"


class EventType(str, Enum):
    """events endpoint 가 이해하는 event_type"""

    TRIGGER = "trigger"
    ACKNOWLEDGE = "acknowledge"
    RESOLVE = "resolve"


# 키 집합은 NotificationType 전체와 일치해야 한다 (validator 가 같은 enum 으로 검사)
EVENT_TYPES: MappingProxyType = MappingProxyType({
    NotificationType.PROBLEM: EventType.TRIGGER,
    NotificationType.ACKNOWLEDGEMENT: EventType.ACKNOWLEDGE,
    NotificationType.RECOVERY: EventType.RESOLVE,
})
