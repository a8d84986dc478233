import json
import logging
import os
import sys
import time
import uuid

LOGGER_NAME = "fieldgen"


class _C:
    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    MAGENTA = "\033[35m"


def _use_color() -> bool:
    return os.getenv("LOG_COLOR", "0") == "1" and sys.stdout.isatty()


def _event_color(event_type: str) -> str:
    et = (event_type or "").upper()
    if "FAILED" in et:
        return _C.RED
    if "UNMAPPED" in et:
        return _C.YELLOW
    if "STARTED" in et or "COMPLETED" in et:
        return _C.GREEN
    return _C.MAGENTA


def get_logger() -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        return logger

    logger.setLevel(logging.INFO)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


logger = get_logger()


def generate_request_id() -> str:
    return str(uuid.uuid4())


def log_event(event_type: str, payload: dict, level: int = logging.INFO):
    """
    One JSON record per event.
    """
    text = json.dumps({"event_type": event_type, **payload}, default=str)

    if _use_color():
        text = f"{_event_color(event_type)}{text}{_C.RESET}"

    logger.log(level, text)


class RequestTimer:
    def __init__(self):
        self.start_time = time.time()

    def duration(self) -> float:
        return round(time.time() - self.start_time, 4)
