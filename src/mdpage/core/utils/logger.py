"""Namespaced loggers for mdpage modules"""

import logging


ROOT = "mdpage"


def get_logger(name: str) -> logging.Logger:
    """Return a stdlib logger under the 'mdpage.' namespace."""
    if not (name == ROOT or name.startswith(f"{ROOT}.")):
        name = f"{ROOT}.{name}"
    return logging.getLogger(name)


def configure_logging(level: str = "WARNING") -> None:
    """Configure root logging for CLI use; library code never calls this."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )
