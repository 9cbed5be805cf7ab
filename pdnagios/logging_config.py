"""
로깅 설정
"""
import logging
import sys


def setup_logging(level: str = "WARNING"):
    """
    CLI 로깅 설정

    - Console handler 사용
    - stderr 출력 (stdout 은 endpoint 응답 출력용)
    - 포맷: '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    """
    # 알 수 없는 이름이면 getLevelName 이 "Level X" 문자열을 돌려준다
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.WARNING

    # 루트 로거 설정
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # 기존 핸들러 제거 (중복 방지)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    console_handler.setFormatter(formatter)

    root_logger.addHandler(console_handler)
