# pdnagios/main.py
"""
pd-nagios CLI 진입점

사용법 (Nagios command 정의 예시):
    pd-nagios -k $CONTACTPAGER$ -t $NOTIFICATIONTYPE$ -n service \
        -f HOSTNAME=$HOSTNAME$ -f SERVICEDESC=$SERVICEDESC$ -f SERVICESTATE=$SERVICESTATE$
"""
from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence
import argparse
import logging
import sys

from pdnagios import config
from pdnagios.application.services.validation import validate
from pdnagios.config import AgentSettings, validate_settings
from pdnagios.container import init_container
from pdnagios.domain.errors import EnqueueError
from pdnagios.domain.notification import NotificationInput
from pdnagios.logging_config import setup_logging

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def parse_field(raw: str) -> tuple[str, str]:
    """
    -f KEY=VALUE 한 개를 파싱한다. VALUE 안의 '=' 는 그대로 둔다.
    ex) "SERVICEOUTPUT=load=3.2" -> ("SERVICEOUTPUT", "load=3.2")
    """
    key, sep, value = raw.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f'invalid field "{raw}" (expected KEY=VALUE)')
    return key, value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pd-nagios",
        description="Queue a Nagios notification as an incident event.",
    )
    # required 여부는 validate() 에서 한 번에 검사한다 (빠진 플래그 전부를 같이 보여주기 위해)
    parser.add_argument("-k", "--service-key", default="", help="service key to route the event to")
    parser.add_argument(
        "-t", "--notification-type", default="",
        help="Nagios notification type: PROBLEM, ACKNOWLEDGEMENT or RECOVERY",
    )
    parser.add_argument("-n", "--source-type", default="", help='"host" or "service"')
    parser.add_argument("-y", "--incident-key", default="", help="incident key (derived when omitted)")
    parser.add_argument(
        "-f", "--field", dest="fields", action="append", type=parse_field, default=[],
        metavar="KEY=VALUE", help="custom field, may be repeated",
    )
    parser.add_argument("--address", default=None, help="events endpoint base URL")
    parser.add_argument(
        "--log-level", default=config.LOG_LEVEL, type=str.upper, choices=LOG_LEVELS,
        help="log level (default: %(default)s)",
    )
    return parser


def to_notification(args: argparse.Namespace) -> NotificationInput:
    # 같은 키가 여러 번 오면 마지막 값 사용
    return NotificationInput(
        service_key=args.service_key,
        notification_type=args.notification_type,
        source_type=args.source_type,
        incident_key=args.incident_key,
        custom_fields=dict(args.fields),
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    notification = to_notification(args)

    try:
        # 플래그 검증이 설정 로딩보다 먼저
        validate(notification)

        settings = AgentSettings.from_env()
        if args.address:
            settings = replace(settings, address=args.address)
        validate_settings(settings)

        container = init_container(settings)
        body = container.enqueue_service.enqueue(notification)
    except EnqueueError as exc:
        logger.debug("Enqueue failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(body)
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
