# pdnagios/application/ports/event_sender.py
"""
이벤트 전송 포트 (인터페이스)

Secondary Port: 애플리케이션이 외부 events endpoint 를 사용하기 위한 인터페이스
"""
from typing import Protocol

from pdnagios.domain.notification import EventPayload


class EventSender(Protocol):
    """
    이벤트 전송 인터페이스

    이 Protocol을 구현하는 어댑터:
    - AgentClient (adapters/agent_client.py)

    Protocol을 사용하는 서비스:
    - enqueue.py (EnqueueService)
    """

    def send(self, payload: EventPayload) -> str:
        """
        이벤트 한 건 전송

        Args:
            payload: 변환이 끝난 EventPayload

        Returns:
            endpoint 응답 body (가공하지 않은 문자열)

        Raises:
            SubmitError: 전송 실패
        """
        ...
