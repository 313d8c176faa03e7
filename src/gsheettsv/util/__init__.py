from .ids import parse_file_id
from .log import configure_logging

__all__ = [
    "parse_file_id",
    "configure_logging",
]
