# tests/test_agent_client.py
import json
from dataclasses import replace

import httpx
import pytest

from pdnagios.adapters.agent_client import AgentClient
from pdnagios.domain.errors import SubmitError
from pdnagios.domain.notification import EventPayload


def make_payload() -> EventPayload:
    return EventPayload(
        service_key="xyz",
        event_type="trigger",
        incident_key="event_source=host;host_name=computer.network",
        description="computer.network is down",
        details={"pd_nagios_object": "host", "HOSTNAME": "computer.network"},
    )


def make_client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


def test_send_posts_json_to_send_path(agent_settings):
    """POST /send 로 wire 포맷 JSON 을 보낸다"""
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"key": "xyz"})

    body = AgentClient(agent_settings, client=make_client(handler)).send(make_payload())

    assert json.loads(body) == {"key": "xyz"}
    assert len(requests) == 1

    request = requests[0]
    assert request.method == "POST"
    assert str(request.url) == "http://127.0.0.1:49463/send"
    assert request.headers["Authorization"] == "token s3cret"
    assert json.loads(request.content) == make_payload().to_wire()


def test_send_returns_raw_body(agent_settings):
    raw = '{"key":"xyz"}'

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text=raw)

    assert AgentClient(agent_settings, client=make_client(handler)).send(make_payload()) == raw


def test_no_authorization_header_without_secret(agent_settings):
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen.update(request.headers)
        return httpx.Response(200, json={"key": "xyz"})

    settings = replace(agent_settings, secret="")
    AgentClient(settings, client=make_client(handler)).send(make_payload())

    assert "authorization" not in seen


def test_url_handles_address_without_trailing_slash(agent_settings):
    client = AgentClient(replace(agent_settings, address="http://agent.local:8080"))

    assert client.url == "http://agent.local:8080/send"


@pytest.mark.parametrize("status", [400, 401, 500, 503])
def test_non_2xx_raises_submit_error(agent_settings, status):
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(status, text="nope")

    with pytest.raises(SubmitError) as exc_info:
        AgentClient(agent_settings, client=make_client(handler)).send(make_payload())

    assert exc_info.value.status_code == status
    assert "nope" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, httpx.HTTPStatusError)
    # 재시도하지 않는다
    assert len(calls) == 1


def test_transport_error_raises_submit_error(agent_settings):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(SubmitError) as exc_info:
        AgentClient(agent_settings, client=make_client(handler)).send(make_payload())

    assert exc_info.value.status_code is None
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


def test_send_builds_and_closes_own_client(agent_settings, monkeypatch):
    """client 를 주입하지 않으면 send 마다 만들고 닫는다"""
    built = []

    def fake_build(self):
        client = make_client(lambda request: httpx.Response(200, json={"key": "xyz"}))
        built.append(client)
        return client

    monkeypatch.setattr(AgentClient, "_build_client", fake_build)

    AgentClient(agent_settings).send(make_payload())

    assert len(built) == 1
    assert built[0].is_closed
