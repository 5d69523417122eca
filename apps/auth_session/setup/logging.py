"""Logging Configuration.

log_json=True이면 ECS 호환 JSON, 아니면 사람이 읽는 한 줄 포맷입니다.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import ecs_logging

if TYPE_CHECKING:
    from apps.auth_session.setup.config import Settings

_base_record_factory = logging.getLogRecordFactory()


def setup_logging(settings: "Settings") -> None:
    """로깅 설정."""
    handler = logging.StreamHandler(sys.stdout)
    if settings.log_json:
        handler.setFormatter(ecs_logging.StdlibFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    # 서비스 메타데이터 추가
    service = {
        "name": settings.service_name,
        "version": settings.service_version,
        "environment": settings.environment,
    }

    def record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
        record = _base_record_factory(*args, **kwargs)
        record.service = service
        return record

    logging.setLogRecordFactory(record_factory)

    # 외부 라이브러리 로그 레벨 조정
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
