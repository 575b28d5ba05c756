"""Dashboard client: API access, kanban board state, analytics and polling."""
from mission_control.client.api import MissionControlAPIError, MissionControlClient
from mission_control.client.board import COLUMNS, KanbanBoard
from mission_control.client.notifications import NotificationCenter
from mission_control.client.poller import DashboardPoller

__all__ = [
    "COLUMNS",
    "DashboardPoller",
    "KanbanBoard",
    "MissionControlAPIError",
    "MissionControlClient",
    "NotificationCenter",
]
