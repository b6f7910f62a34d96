"""
Logging setup for the Recruiter Platform API.

Two output modes share one stdout handler:
- JSON lines (python-json-logger) stamped with the service name and environment,
  carrying any request fields passed through `extra=`
- a single readable line per record for local development
"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from pythonjsonlogger import jsonlogger

# Fields the request middleware attaches through `extra=`
REQUEST_FIELDS = ("client", "method", "path", "status_code", "duration_ms", "job_id")

_READABLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class ServiceJsonFormatter(jsonlogger.JsonFormatter):
    """
    JSON formatter tagging every record with the service and environment.

    Request fields are kept only when present, so plain application logs
    stay short. Warnings and errors also carry their source location.
    """

    def __init__(self, *args, service: str = "", environment: str = "", **kwargs):
        super().__init__(*args, **kwargs)
        self.service = service
        self.environment = environment

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record["service"] = self.service
        log_record["environment"] = self.environment

        for field in REQUEST_FIELDS:
            if log_record.get(field) is None:
                log_record.pop(field, None)

        if record.levelno >= logging.WARNING:
            log_record["source"] = f"{record.pathname}:{record.lineno}"


def setup_logging(
    log_level: str = "INFO",
    json_logs: bool = True,
    service: str = "recruiter-platform-api",
    environment: Optional[str] = None,
) -> None:
    """
    Configure the root logger.

    Args:
        log_level: Logging level name, case-insensitive
        json_logs: JSON lines when True, readable lines otherwise
        service: Service name stamped on JSON records
        environment: Hosting environment stamped on JSON records
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    if json_logs:
        handler.setFormatter(ServiceJsonFormatter(
            "%(timestamp)s %(level)s %(logger)s %(message)s",
            service=service,
            environment=environment or "",
        ))
    else:
        handler.setFormatter(logging.Formatter(_READABLE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root_logger.setLevel(log_level.upper())
    root_logger.addHandler(handler)

    # The request middleware already logs each request once
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Named logger for a module of this service."""
    return logging.getLogger(name)
