"""CLI command modules."""

from .checkin import check_in
from .entries import clear, delete
from .export import export
from .history import history
from .init import init
from .reminder import reminder
from .view import view

__all__ = [
    "check_in",
    "history",
    "delete",
    "clear",
    "export",
    "reminder",
    "view",
    "init",
]
