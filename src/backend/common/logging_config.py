# SPDX-FileCopyrightText: 2025 greeter
#
# SPDX-License-Identifier: MIT
import json
import logging
import os
from collections.abc import Sequence
from datetime import datetime, timezone
from typing import Any
from opentelemetry import _logs
from opentelemetry.exporter.otlp.proto.http._log_exporter import OTLPLogExporter
from opentelemetry.sdk._logs import LoggerProvider, LoggingHandler
from opentelemetry.sdk._logs.export import BatchLogRecordProcessor
from opentelemetry.sdk.resources import Resource
from opentelemetry.semconv.resource import ResourceAttributes


_configured = False
# Attributes every LogRecord carries; anything else arrived through ``extra=``
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {
    "message",
    "asctime",
}


class ServiceFormatter(logging.Formatter):
    """Base console formatter tagging records with service and environment."""

    def __init__(self, service_name: str, environment: str) -> None:
        super().__init__()
        self.service_name = service_name
        self.environment = environment

    def fields(self, record: logging.LogRecord) -> dict[str, Any]:
        fields: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self.service_name,
            "environment": self.environment,
        }
        for key, value in vars(record).items():
            if key not in _RECORD_ATTRS:
                fields.setdefault(key, value)
        if record.exc_info:
            fields["exception"] = self.formatException(record.exc_info)
        return fields


class JsonFormatter(ServiceFormatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        return json.dumps(self.fields(record), ensure_ascii=True, default=str)


class PrettyFormatter(ServiceFormatter):
    """Human-readable, single-line log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        fields = self.fields(record)
        head = (
            f"{fields.pop('timestamp')} {fields.pop('level'):<7} "
            f"[{fields.pop('logger')}] {fields.pop('message')}"
        )
        tail = " ".join(f"{k}={v}" for k, v in fields.items())
        return f"{head} {tail}"


def _logger_provider(resource: Resource) -> LoggerProvider:
    provider = LoggerProvider(resource=resource)
    endpoint = os.getenv("OTEL_EXPORTER_OTLP_LOGS_ENDPOINT") or os.getenv(
        "OTEL_EXPORTER_OTLP_ENDPOINT"
    )
    if not endpoint:
        return provider

    try:
        provider.add_log_record_processor(
            BatchLogRecordProcessor(OTLPLogExporter(endpoint=endpoint))
        )
    except Exception as err:  # pragma: no cover
        logging.getLogger(__name__).warning(
            "OTLP exporter setup failed; console logging only",
            extra={"error": str(err)},
        )
    return provider


def configure_logging(
    service_name: str,
    service_version: str | None = None,
    environment: str | None = None,
    notify_loggers: Sequence[str] = (),
) -> None:
    """
    Configure process logging once: console output plus OpenTelemetry.

    LOG_LEVEL sets the root level. Loggers named in ``notify_loggers`` keep
    emitting INFO when LOG_LEVEL is higher, so one-off notices such as the
    startup line survive a quiet setup. LOG_FORMAT picks ``pretty`` (default)
    or ``json``. Records are shipped over OTLP HTTP only when
    OTEL_EXPORTER_OTLP_LOGS_ENDPOINT or OTEL_EXPORTER_OTLP_ENDPOINT is set.
    """
    global _configured
    if _configured:
        return

    level = getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO)
    env = (
        environment
        if environment is not None
        else os.getenv("ENVIRONMENT", "development")
    )

    provider = _logger_provider(
        Resource.create(
            {
                ResourceAttributes.SERVICE_NAME: service_name,
                ResourceAttributes.SERVICE_VERSION: service_version or "unknown",
                ResourceAttributes.DEPLOYMENT_ENVIRONMENT: env,
            }
        )
    )
    _logs.set_logger_provider(provider)

    formatter_cls = (
        JsonFormatter
        if os.getenv("LOG_FORMAT", "pretty").lower() == "json"
        else PrettyFormatter
    )
    console = logging.StreamHandler()
    console.setFormatter(formatter_cls(service_name, env))

    # Handlers stay at NOTSET; levels are decided per logger
    root = logging.getLogger()
    root.setLevel(level)
    root.handlers[:] = [console, LoggingHandler(logger_provider=provider)]
    for name in notify_loggers:
        logging.getLogger(name).setLevel(min(level, logging.INFO))

    _configured = True
