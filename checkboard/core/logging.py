# checkboard/core/logging.py
import logging
import sys
from datetime import datetime, timezone
from typing import Dict, Any
from pythonjsonlogger import jsonlogger


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter for structured logging"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]):
        super().add_fields(log_record, record, message_dict)

        if not log_record.get("timestamp"):
            log_record["timestamp"] = datetime.now(timezone.utc).isoformat()

        if record.name:
            log_record["logger"] = record.name

        log_record["level"] = record.levelname

        # Evaluation context, when the caller passed it through `extra`
        if hasattr(record, "check_type"):
            log_record["check_type"] = record.check_type

        if hasattr(record, "compliance_check_id"):
            log_record["compliance_check_id"] = record.compliance_check_id


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure structured JSON logging on the package logger"""
    logger = logging.getLogger("checkboard")
    logger.setLevel(level)
    logger.propagate = False

    if not any(isinstance(h.formatter, CustomJsonFormatter) for h in logger.handlers):
        console_handler = logging.StreamHandler(sys.stdout)
        formatter = CustomJsonFormatter(
            "%(timestamp)s %(level)s %(logger)s %(message)s"
        )
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger
