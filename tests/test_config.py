# tests/test_config.py
import pytest

from pdnagios import config
from pdnagios.config import AgentSettings, validate_settings
from pdnagios.domain.errors import ConfigError


def test_from_env_reads_module_settings(monkeypatch):
    monkeypatch.setattr(config, "PDAGENT_ADDRESS", "http://agent.local:49463/")
    monkeypatch.setattr(config, "PDAGENT_SECRET", "token")
    monkeypatch.setattr(config, "PDAGENT_TIMEOUT", "12.5")
    monkeypatch.setattr(config, "PDAGENT_VERIFY_SSL", "false")
    monkeypatch.setattr(config, "ENV", "staging")

    settings = AgentSettings.from_env()

    assert settings == AgentSettings(
        address="http://agent.local:49463/",
        secret="token",
        timeout=12.5,
        verify_ssl=False,
        env="staging",
    )


def test_from_env_rejects_non_numeric_timeout(monkeypatch):
    monkeypatch.setattr(config, "PDAGENT_TIMEOUT", "soon")

    with pytest.raises(ConfigError):
        AgentSettings.from_env()


def test_validate_settings_production_needs_secret(agent_settings):
    from dataclasses import replace

    validate_settings(replace(agent_settings, env="production"))

    with pytest.raises(ConfigError, match="PDAGENT_SECRET"):
        validate_settings(replace(agent_settings, env="production", secret=""))


def test_validate_settings_rejects_non_positive_timeout(agent_settings):
    from dataclasses import replace

    with pytest.raises(ConfigError):
        validate_settings(replace(agent_settings, timeout=0))
