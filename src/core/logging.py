"""
Logging — конфигурация structlog

Два режима вывода:
- Human (default): ConsoleRenderer в stderr
- JSON: структурированные JSON-строки в stderr

Вычислительное ядро (arithmetic, growth) не логирует: оно вызывается
в каждом кадре. Логируются только граничные события — санитизация
сохранённых записей, отклонённый ввод, заблокированные покупки.
"""

import logging
import sys

import structlog

# Корневой logger пакета (модули получают дочерние через get_logger(__name__))
PACKAGE_LOGGER_NAME = "src"


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """
    Настройка процессоров structlog и маршрутизации вывода.

    Args:
        verbose: DEBUG для логгеров пакета; иначе только WARNING+
        log_json: JSONRenderer вместо ConsoleRenderer
    """
    package_level = logging.DEBUG if verbose else logging.WARNING

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
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


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Логгер модуля (обёртка над structlog.get_logger)."""
    return structlog.get_logger(name)
