import logging
import re
from contextvars import ContextVar
from typing import Any


LOG_FORMAT = "%(asctime)s %(levelname)s [run_id=%(run_id)s] %(name)s - %(message)s"
REDACTED = "[REDACTED]"

# Authorization header values and GitHub token shapes the API client can echo back.
_BEARER_PATTERN = re.compile(r"(Bearer\s+)[A-Za-z0-9_\-.]+", re.IGNORECASE)
_GITHUB_TOKEN_PATTERN = re.compile(r"\b(?:gh[pousr]_|github_pat_)[A-Za-z0-9_]+\b")

_run_id_ctx: ContextVar[str] = ContextVar("run_id", default="-")
_registered_secrets: set[str] = set()


def set_run_id(run_id: str) -> None:
    _run_id_ctx.set(run_id)


def get_run_id() -> str:
    return _run_id_ctx.get()


def register_sensitive_values(*values: str) -> None:
    _registered_secrets.update(value for value in values if value)


def safe_message(message: str) -> str:
    for secret in _registered_secrets:
        message = message.replace(secret, REDACTED)
    message = _BEARER_PATTERN.sub(rf"\1{REDACTED}", message)
    return _GITHUB_TOKEN_PATTERN.sub(REDACTED, message)


def configure_logging(debug: bool = False) -> None:
    """Send log records to stderr tagged with the workflow run id.

    Safe to call more than once: the second call only adjusts the level.
    """
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(format=LOG_FORMAT)
    root_logger.setLevel(logging.DEBUG if debug else logging.INFO)

    base_factory = logging.getLogRecordFactory()
    if getattr(base_factory, "_adds_run_id", False):
        return

    def record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
        record = base_factory(*args, **kwargs)
        record.run_id = get_run_id()
        return record

    record_factory._adds_run_id = True  # type: ignore[attr-defined]
    logging.setLogRecordFactory(record_factory)


def _format_field_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    text = value if isinstance(value, str) else str(value)
    return safe_message(text).replace('"', '\\"')


def log_event(logger: logging.Logger, level: int, event: str, **fields: Any) -> None:
    parts = [f"event={event}"]
    parts.extend(
        f'{key}="{_format_field_value(value)}"'
        for key, value in fields.items()
        if value is not None
    )
    logger.log(level, " ".join(parts))
