import sys
import traceback
from typing import Any

from pydantic import BaseModel
from uvicorn.server import logger

from util.config import config
from util.errors import ServiceError

_LEVELS = {"trace": 0, "debug": 1, "info": 2, "warning": 3, "error": 4}
_LEVEL_ALIASES = {"TRACE": "trace", "DEBUG": "debug", "INFO": "info", "WARN": "warning", "ERROR": "error"}


def _should_log(level: str) -> bool:
    if config.log_level == "local":
        return True  # we always log in local context
    current_level = _LEVELS.get(config.log_level, 2)  # default to info
    request_level = _LEVELS.get(_LEVEL_ALIASES.get(level, level.lower()), 2)
    return request_level >= current_level


def _describe(arg: Any) -> str:
    if isinstance(arg, ServiceError):
        return f"! {arg.to_log_string()}"
    if isinstance(arg, Exception):
        return f"! {str(type(arg).__name__)} (see below)"
    if isinstance(arg, BaseModel):
        return f"{type(arg).__name__}:\n```\n{arg.model_dump_json(by_alias = True, exclude_none = True)}\n```"
    if hasattr(arg, "__dict__") and not callable(arg):
        return f"{type(arg).__name__}:\n```\n{repr(arg)}\n```"
    return f"{str(arg)}"


def _format_args(*args: Any) -> tuple[str, list[Exception]]:
    exceptions = [arg for arg in args if isinstance(arg, Exception)]
    formatted_parts = [_describe(arg) for arg in args]

    # edge: nothing or only one line to print
    if len(formatted_parts) <= 1:
        return "".join(formatted_parts), exceptions

    # edge: message lines are available, but no exceptions
    if not exceptions:
        head_lines = "\n ├─ ".join(formatted_parts[:-1])
        tail_line = formatted_parts[-1]
        return f"{head_lines}\n └─ {tail_line}", exceptions

    # message and exceptions are available, connect messages with a tree
    return "\n ├─ ".join(formatted_parts), exceptions


def _print_locally(level: str, message: str | None, exceptions: list[Exception]):
    if message is not None:
        print(f"[{level[0]}] {message}")
    for exception in exceptions:
        print(f" ‼  Message: {str(exception)}", file = sys.stderr)
        if trace := exception.__traceback__:
            trace_lines = traceback.format_tb(trace)
            print("".join(("    " + line.strip() + "\n") for line in trace_lines), file = sys.stderr)


def _log_to_server(level: str, message: str | None, exceptions: list[Exception]):
    if message is not None:
        match level:
            case "TRACE" | "DEBUG":
                logger.debug(message)
            case "INFO":
                logger.info(message)
            case "WARN":
                logger.warning(message)
            case "ERROR":
                logger.error(message)
    for exception in exceptions:
        logger.error(f"Message: {str(exception)}")
        if trace := exception.__traceback__:
            indented_trace = "".join(traceback.format_tb(trace)).strip()
            logger.error(f"Details:\n └─ {indented_trace}")


def _log_message(level: str, message: str, exceptions: list[Exception]) -> str:
    if not _should_log(level) and not exceptions:
        return message

    # the base message is printed only if the level allows it, exceptions always are
    printable_message = message if _should_log(level) else None
    if config.log_level == "local":
        _print_locally(level, printable_message, exceptions)
        return message
    try:
        _log_to_server(level, printable_message, exceptions)
    except Exception:
        # fallback to local printing if uvicorn logger fails
        _print_locally(level, printable_message, exceptions)
    return message


def t(*args: Any) -> str:
    message, exceptions = _format_args(*args)
    return _log_message("TRACE", message, exceptions)


def d(*args: Any) -> str:
    message, exceptions = _format_args(*args)
    return _log_message("DEBUG", message, exceptions)


def i(*args: Any) -> str:
    message, exceptions = _format_args(*args)
    return _log_message("INFO", message, exceptions)


def w(*args: Any) -> str:
    message, exceptions = _format_args(*args)
    return _log_message("WARN", message, exceptions)


def e(*args: Any) -> str:
    message, exceptions = _format_args(*args)
    return _log_message("ERROR", message, exceptions)
