# pdnagios/application/services/enqueue.py
from __future__ import annotations

import logging

from pdnagios.application.ports.event_sender import EventSender
from pdnagios.domain.notification import NotificationInput
from .translation import translate
from .validation import validate

logger = logging.getLogger(__name__)


class EnqueueService:
    """
    Nagios 알림 enqueue 서비스

    책임:
    - 입력 검증
    - 이벤트 변환
    - endpoint 전송
    """

    def __init__(self, sender: EventSender):
        """
        Args:
            sender: 이벤트 전송 구현체
        """
        self.sender = sender

    def enqueue(self, notification: NotificationInput) -> str:
        """
        검증 -> 변환 -> 전송 을 순서대로 수행한다.

        Args:
            notification: CLI 플래그에서 만든 입력

        Returns:
            endpoint 응답 body

        Raises:
            ValidationFailure: 입력 검증 실패 (전송하지 않음)
            SubmitError: 전송 실패
        """
        validate(notification)

        payload = translate(notification)
        logger.debug(
            "Translated %s/%s notification -> event_type=%s",
            notification.source_type,
            notification.notification_type,
            payload.event_type,
        )

        return self.sender.send(payload)
