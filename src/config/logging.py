"""
Logging — конфигурация structlog

Два режима вывода:
- Human (по умолчанию): цветной console вывод в stderr
- JSON (log_json=True): структурированные JSON-строки в stderr

Логгеры модулей получаются через structlog.get_logger(__name__) и
маршрутизируются через stdlib logging, поэтому уровень задаётся для
логгера пакета "src".
"""

import logging
import sys
from typing import Final

import structlog

# Имя корневого логгера проекта (все модули живут под пакетом src)
PACKAGE_LOGGER_NAME: Final[str] = "src"


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """
    Настройка процессоров structlog и маршрутизации вывода.

    Повторный вызов не дублирует handlers.

    Args:
        verbose: DEBUG для логгеров проекта. Иначе только WARNING+.
        log_json: JSON renderer вместо console renderer.
    """
    package_level = logging.DEBUG if verbose else logging.WARNING

    shared_processors: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER_NAME).setLevel(package_level)
