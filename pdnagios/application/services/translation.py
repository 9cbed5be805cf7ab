# pdnagios/application/services/translation.py
"""
Nagios 알림 -> events endpoint 이벤트 변환

validate() 를 통과한 입력만 넘어온다고 가정한다.
"""
from __future__ import annotations

from pdnagios.domain.notification import (
    NAGIOS_OBJECT_KEY,
    CustomField,
    EventPayload,
    NotificationInput,
)
from pdnagios.domain.notification_type import EVENT_TYPES, NotificationType, SourceType


def build_incident_key(notification: NotificationInput) -> str:
    """
    incident key 를 결정적으로 만든다.

    같은 host (또는 host + service) 에 대한 PROBLEM / RECOVERY / ACKNOWLEDGEMENT 가
    모두 같은 key 를 가져야 downstream 에서 하나의 incident 로 묶인다.
    """
    hostname = notification.get_field(CustomField.HOSTNAME)

    if notification.source_type == SourceType.SERVICE.value:
        service_desc = notification.get_field(CustomField.SERVICEDESC)
        return f"event_source=service;host_name={hostname};service_desc={service_desc}"

    return f"event_source=host;host_name={hostname}"


def build_event_description(notification: NotificationInput) -> str:
    """
    사람이 읽을 한 줄 요약.
    ex) "computer.network is down", "serviceA on computer.network is CRITICAL"
    """
    hostname = notification.get_field(CustomField.HOSTNAME)

    if notification.source_type == SourceType.SERVICE.value:
        return "{} on {} is {}".format(
            notification.get_field(CustomField.SERVICEDESC),
            hostname,
            notification.get_field(CustomField.SERVICESTATE),
        )

    return f"{hostname} is {notification.get_field(CustomField.HOSTSTATE)}"


def translate(notification: NotificationInput) -> EventPayload:
    event_type = EVENT_TYPES[NotificationType(notification.notification_type)]

    # 원본 dict 는 건드리지 않는다
    details = {NAGIOS_OBJECT_KEY: notification.source_type}
    details.update(notification.custom_fields)

    return EventPayload(
        service_key=notification.service_key,
        event_type=event_type.value,
        incident_key=notification.incident_key or build_incident_key(notification),
        description=build_event_description(notification),
        details=details,
    )
