from __future__ import annotations

from dataclasses import dataclass
import os

from dotenv import load_dotenv

from pdnagios.domain.errors import ConfigError

# .env 읽어오기
load_dotenv()

# events endpoint (로컬 pdagent 서버)
PDAGENT_ADDRESS = os.getenv("PDAGENT_ADDRESS", "http://127.0.0.1:49463/")
PDAGENT_SECRET = os.getenv("PDAGENT_SECRET", "")
PDAGENT_TIMEOUT = os.getenv("PDAGENT_TIMEOUT", "30")
PDAGENT_VERIFY_SSL = os.getenv("PDAGENT_VERIFY_SSL", "true")

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

# Environment
ENV = os.getenv("ENV", "development")


def _parse_bool(raw: str) -> bool:
    return raw.strip().lower() not in ("0", "false", "no", "off")


@dataclass(frozen=True)
class AgentSettings:
    address: str
    secret: str
    timeout: float
    verify_ssl: bool
    env: str = "development"

    @classmethod
    def from_env(cls) -> "AgentSettings":
        """
        모듈 상수(.env + 환경변수)로부터 설정 생성

        Raises:
            ConfigError: PDAGENT_TIMEOUT 이 숫자가 아닌 경우
        """
        try:
            timeout = float(PDAGENT_TIMEOUT)
        except ValueError:
            raise ConfigError(
                f"PDAGENT_TIMEOUT must be a number of seconds, got {PDAGENT_TIMEOUT!r}"
            ) from None

        return cls(
            address=PDAGENT_ADDRESS,
            secret=PDAGENT_SECRET,
            timeout=timeout,
            verify_ssl=_parse_bool(PDAGENT_VERIFY_SSL),
            env=ENV,
        )


def validate_settings(settings: AgentSettings) -> None:
    """Production 환경 검증"""
    if not settings.address:
        raise ConfigError("PDAGENT_ADDRESS is not set")
    if settings.timeout <= 0:
        raise ConfigError("PDAGENT_TIMEOUT must be positive")

    if settings.env == "production":
        if not settings.secret:
            raise ConfigError("PDAGENT_SECRET is not set")
