"""Client for the GTD task API.

Public API:
- TaskApi: typed async HTTP binding
- TaskListState, ClientState: mirror state container for a list UI

Errors:
- ClientError, TransportError, ResponseError
"""

from gtd.client.api import TaskApi
from gtd.client.errors import ClientError, ResponseError, TransportError
from gtd.client.state import ClientState, TaskListState

__all__ = [
    "ClientError",
    "ClientState",
    "ResponseError",
    "TaskApi",
    "TaskListState",
    "TransportError",
]
