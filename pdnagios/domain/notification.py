# pdnagios/domain/notification.py
from __future__ import annotations

from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class CustomField(str, Enum):
    """
    -f 플래그로 들어오는 custom field 중 우리가 이름으로 참조하는 것들.
    나머지 키는 그대로 details 로 흘려보낸다.
    """

    HOSTNAME = "HOSTNAME"
    HOSTSTATE = "HOSTSTATE"
    SERVICEDESC = "SERVICEDESC"
    SERVICESTATE = "SERVICESTATE"


# details 에 항상 추가되는 synthetic 키
NAGIOS_OBJECT_KEY = "pd_nagios_object"


class NotificationInput(BaseModel):
    """
    CLI 플래그에서 읽은 Nagios 알림 한 건.

    값 검증은 validator 가 담당하므로 여기서는 전부 문자열로 받는다.
    빈 문자열 == 플래그가 없음.
    """

    model_config = ConfigDict(frozen=True)

    service_key: str = ""
    notification_type: str = ""
    source_type: str = ""
    incident_key: str = ""
    custom_fields: Dict[str, str] = Field(default_factory=dict)

    def get_field(self, field: CustomField) -> str:
        """
        custom field 값을 돌려준다. 없으면 빈 문자열.
        ex) get_field(CustomField.HOSTNAME) -> "computer.network"
        """
        return self.custom_fields.get(field.value, "")


class EventPayload(BaseModel):
    """
    events endpoint 로 보내는 정규화된 이벤트.
    """

    model_config = ConfigDict(frozen=True)

    service_key: str
    event_type: str
    incident_key: str
    description: str
    details: Dict[str, str]

    def to_wire(self) -> Dict[str, Any]:
        """POST /send 의 JSON body"""
        return {
            "service_key": self.service_key,
            "event_type": self.event_type,
            "incident_key": self.incident_key,
            "description": self.description,
            "details": dict(self.details),
        }
