"""Logging Configuration.

ECS 호환 JSON 로깅 설정입니다.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import ecs_logging

from safebed.setup.config import get_settings

_original_record_factory = logging.getLogRecordFactory()


def setup_logging() -> None:
    """로깅 설정."""
    settings = get_settings()

    handler = logging.StreamHandler(sys.stdout)
    if settings.log_format == "text":
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
    else:
        handler.setFormatter(ecs_logging.StdlibFormatter())

    # 루트 로거 설정
    root_logger = logging.getLogger()
    root_logger.setLevel(settings.log_level.upper())
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    # 서비스 메타데이터 추가 (재호출 시 중첩되지 않도록 원본 factory 기준)
    def record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
        record = _original_record_factory(*args, **kwargs)
        record.service = {
            "name": settings.service_name,
            "version": settings.service_version,
            "environment": settings.environment,
        }
        return record

    logging.setLogRecordFactory(record_factory)

    # 외부 라이브러리 로그 레벨 조정
    for logger_name in ("httpx", "httpcore", "sqlalchemy.engine", "sqlalchemy.pool", "uvicorn.access"):
        logging.getLogger(logger_name).setLevel(logging.WARNING)
