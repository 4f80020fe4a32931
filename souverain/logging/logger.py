import logging
import sys
from typing import TextIO


class Log:
    """Process-wide logging facade.

    Keyword arguments are appended to the message as ``key=value`` pairs so
    callers can attach the request scope and counters. Original PII values
    must never be passed here.
    """

    _logger: logging.Logger = logging.getLogger("souverain")

    @classmethod
    def configure(cls, log_level: str, stream: TextIO | None = None) -> None:
        """Set the level and attach a single handler (stdout unless *stream* is given)."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(stream or sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **fields: object) -> None:
        cls._logger.info(cls._render(message, fields))

    @classmethod
    def error(cls, message: str, **fields: object) -> None:
        cls._logger.error(cls._render(message, fields))

    @classmethod
    def warning(cls, message: str, **fields: object) -> None:
        cls._logger.warning(cls._render(message, fields))

    @classmethod
    def debug(cls, message: str, **fields: object) -> None:
        cls._logger.debug(cls._render(message, fields))

    @staticmethod
    def _render(message: str, fields: dict[str, object]) -> str:
        present = {k: v for k, v in fields.items() if v is not None}
        if not present:
            return message
        suffix = " ".join(f"{key}={value}" for key, value in sorted(present.items()))
        return f"{message} [{suffix}]"
