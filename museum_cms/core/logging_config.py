# museum_cms/core/logging_config.py

"""
애플리케이션 로깅 설정 모듈입니다.

루트 로거에 콘솔 핸들러를 한 번만 붙이고, 각 모듈은
`logging.getLogger(__name__)`로 얻은 로거를 사용합니다.
"""

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> None:
    """
    루트 로거를 설정합니다.
    이미 핸들러가 붙어 있으면(테스트 러너, uvicorn 재시작 등) 아무것도 하지 않습니다.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(console_handler)
