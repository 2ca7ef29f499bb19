"""
Structured JSON logging.

Every log line is a single JSON object so log collectors can index fields
such as the tool name or the service being registered. Structured fields
are attached with:

    logger.info("Tool call completed", extra={"log_data": {"tool": name}})

Logs go to stderr: under the stdio transport stdout carries the MCP message
stream, and any stray output there would corrupt the protocol.
"""

import json
import logging
import sys


class JSONLogFormatter(logging.Formatter):
    """
    Formats log records as single-line JSON objects.

    Example output:

        {"timestamp": "2026-02-06 10:30:00,123", "level": "INFO",
         "logger": "digitalocean-mcp", "message": "Tool call completed",
         "tool": "droplet-list", "duration_ms": 182.4}
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if hasattr(record, "log_data"):
            log_entry.update(record.log_data)
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, default=str)


def configure_logging(level: str) -> None:
    """Send every logger through the JSON formatter on stderr at `level`."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JSONLogFormatter())

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        handlers=[handler],
        force=True,
    )
