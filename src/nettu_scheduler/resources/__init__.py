"""Resource clients, one per area of the scheduler API.

Admin variants authenticate with an account API key and address users
explicitly (``/user/{user_id}/...``). User variants act as the end user
identified by the credentials.
"""

from nettu_scheduler.resources.account import AccountClient
from nettu_scheduler.resources.calendar import CalendarClient, CalendarUserClient
from nettu_scheduler.resources.event import EventClient, EventUserClient
from nettu_scheduler.resources.health import HealthClient
from nettu_scheduler.resources.schedule import ScheduleClient, ScheduleUserClient
from nettu_scheduler.resources.service import ServiceClient, ServiceUserClient
from nettu_scheduler.resources.user import UserClient, UserUserClient

__all__ = [
    "AccountClient",
    "CalendarClient",
    "CalendarUserClient",
    "EventClient",
    "EventUserClient",
    "HealthClient",
    "ScheduleClient",
    "ScheduleUserClient",
    "ServiceClient",
    "ServiceUserClient",
    "UserClient",
    "UserUserClient",
]
