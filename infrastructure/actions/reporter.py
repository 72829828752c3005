import sys
from typing import TextIO

from application.event_flow import EventFlowResult
from infrastructure.observability.logging_utils import safe_message


EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _write(line: str, stream: TextIO | None) -> None:
    target = stream if stream is not None else sys.stdout
    target.write(line + "\n")
    target.flush()


def issue_command(command: str, message: str, stream: TextIO | None = None) -> None:
    _write(f"::{command}::{escape_data(safe_message(message))}", stream)


def info(message: str, stream: TextIO | None = None) -> None:
    _write(safe_message(message), stream)


def debug(message: str, stream: TextIO | None = None) -> None:
    issue_command("debug", message, stream)


def warning(message: str, stream: TextIO | None = None) -> None:
    issue_command("warning", message, stream)


def set_failed(message: str, stream: TextIO | None = None) -> int:
    issue_command("error", message, stream)
    return EXIT_FAILURE


def report_result(result: EventFlowResult, stream: TextIO | None = None) -> int:
    if result.failed:
        return set_failed(result.message, stream)
    info(result.message, stream)
    return EXIT_SUCCESS
