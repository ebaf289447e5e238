"""Resolve ``module:attribute`` references given on the command line."""

import importlib
from typing import Any

import structlog

logger = structlog.get_logger()


def load_target(path: str) -> Any:
    """
    Import ``module:attribute`` and return a dataclass instance to bind into.

    Args:
        path: Reference such as ``myapp.settings:Config``. Classes are
            instantiated without arguments; instances are returned as-is.

    Returns:
        The object to bind into
    """
    module_name, sep, attr_path = path.partition(":")
    if not sep or not module_name or not attr_path:
        raise ImportError(f"invalid target '{path}', expected module:attribute")

    obj: Any = importlib.import_module(module_name)
    for attr in attr_path.split("."):
        obj = getattr(obj, attr)

    if isinstance(obj, type):
        logger.debug("Instantiating target class", target=path)
        obj = obj()
    return obj
