# pdnagios/adapters/agent_client.py
"""
events endpoint (pdagent) HTTP 어댑터
"""
from __future__ import annotations

from typing import Optional
import logging

import httpx

from pdnagios.config import AgentSettings
from pdnagios.domain.errors import SubmitError
from pdnagios.domain.notification import EventPayload

logger = logging.getLogger(__name__)

SEND_PATH = "/send"
USER_AGENT = "pd-nagios"


class AgentClient:
    """EventPayload 를 POST /send 로 전송"""

    def __init__(
        self,
        settings: AgentSettings,
        client: Optional[httpx.Client] = None,
    ):
        """
        Args:
            settings: endpoint 주소, 토큰, timeout
            client: 주입할 httpx.Client (테스트용). 없으면 send 마다 새로 만든다.
        """
        self.settings = settings
        self._client = client

    @property
    def url(self) -> str:
        return self.settings.address.rstrip("/") + SEND_PATH

    def _headers(self) -> dict[str, str]:
        headers = {"User-Agent": USER_AGENT}
        if self.settings.secret:
            headers["Authorization"] = f"token {self.settings.secret}"
        return headers

    def _build_client(self) -> httpx.Client:
        return httpx.Client(
            timeout=self.settings.timeout,
            verify=self.settings.verify_ssl,
        )

    def send(self, payload: EventPayload) -> str:
        """
        이벤트 한 건을 전송한다. 재시도하지 않는다.

        Returns:
            응답 body 원문

        Raises:
            SubmitError: 네트워크 에러 또는 non-2xx 응답
        """
        if self._client is not None:
            return self._post(self._client, payload)

        with self._build_client() as client:
            return self._post(client, payload)

    def _post(self, client: httpx.Client, payload: EventPayload) -> str:
        logger.info(
            "Sending %s event (incident_key=%s) to %s",
            payload.event_type,
            payload.incident_key,
            self.url,
        )

        try:
            resp = client.post(self.url, json=payload.to_wire(), headers=self._headers())
        except httpx.HTTPError as exc:
            logger.debug("Request to %s failed: %s", self.url, exc)
            raise SubmitError(f"failed to send event: {exc}") from exc

        try:
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.debug(
                "Response error. status=%s body=%s",
                resp.status_code,
                resp.text[:200],  # keep logs short to avoid dumping entire payload
            )
            raise SubmitError(
                f"failed to send event: status={resp.status_code} body={resp.text[:200]}",
                status_code=resp.status_code,
            ) from exc

        logger.info("Event accepted. status=%s", resp.status_code)
        return resp.text
