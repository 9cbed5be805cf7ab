# pdnagios/container.py
"""
의존성 조립 (Dependency Assembly)
"""
from __future__ import annotations

import logging

from pdnagios.adapters.agent_client import AgentClient
from pdnagios.application.services.enqueue import EnqueueService
from pdnagios.config import AgentSettings

logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    서비스 컨테이너

    CLI 한 번 실행에 필요한 의존성을 생성하고 조립합니다.
    """

    def __init__(self, settings: AgentSettings):
        # Adapter 생성
        self._agent_client = AgentClient(settings)

        # Services 생성
        self._enqueue_service = EnqueueService(self._agent_client)

    @property
    def enqueue_service(self) -> EnqueueService:
        """EnqueueService 인스턴스"""
        return self._enqueue_service


def init_container(settings: AgentSettings) -> ServiceContainer:
    """
    ServiceContainer 초기화

    CLI 시작 시 명시적으로 호출합니다.
    """
    container = ServiceContainer(settings)
    logger.debug("Service container initialized (address=%s)", settings.address)
    return container
