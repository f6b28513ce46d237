"""HTTP server for GTD."""

from gtd.server.app import GtdServer, create_app
from gtd.server.runner import ServerRunner

__all__ = [
    "GtdServer",
    "ServerRunner",
    "create_app",
]
