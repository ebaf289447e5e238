import logging
from dataclasses import dataclass


@dataclass
class LogLevel:
    """Log level given by name.

    ``error``, ``warn``/``warning`` and ``debug`` are recognised regardless of
    case; anything else means ``info``. ``value`` is the numeric level that
    ``structlog.make_filtering_bound_logger`` and ``logging`` expect.
    """

    value: int = logging.INFO

    def set(self, value: str) -> None:
        name = value.lower()
        if name == "error":
            self.value = logging.ERROR
        elif name in ("warn", "warning"):
            self.value = logging.WARNING
        elif name == "debug":
            self.value = logging.DEBUG
        else:
            self.value = logging.INFO

    @property
    def name(self) -> str:
        return logging.getLevelName(self.value)
