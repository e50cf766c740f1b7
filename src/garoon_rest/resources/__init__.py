"""Resource clients, one per Garoon API family.

Each client maps its operations onto ``(verb, path, params)`` and delegates
to an `HttpClient`. No business validation happens here; invalid input is
rejected by the server.
"""

from garoon_rest.resources.base import BaseClient
from garoon_rest.resources.presence import PresenceClient
from garoon_rest.resources.schedule import ScheduleClient

__all__ = ["BaseClient", "PresenceClient", "ScheduleClient"]
