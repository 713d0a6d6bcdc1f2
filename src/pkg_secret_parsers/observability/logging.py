"""Structured (JSON) logging setup."""

from __future__ import annotations

import logging

from pythonjsonlogger.json import JsonFormatter


class ServiceNameFilter(logging.Filter):
    """Stamps every record with the service name.

    Client secrets must never reach a log record.
    """

    def __init__(self, service_name: str) -> None:
        super().__init__()
        self._service_name = service_name

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        record.service = self._service_name
        return True


def configure_logging(level: str, service_name: str) -> None:
    """Install a JSON handler on the root logger."""

    formatter = JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s %(service)s",
        rename_fields={"levelname": "level", "name": "logger"},
    )

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(formatter)
    handler.addFilter(ServiceNameFilter(service_name))

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers = [handler]
