"""
Acting user resolution

The host's login flow stores the signed-in user in the session cookie as
{"id": <int>, "role": <str>}. Admin routes read it back from there.
"""

import logging

from fastapi import Request

from coil.admin.context import Actor
from coil.exceptions import AuthenticationError

logger = logging.getLogger(__name__)


async def get_current_actor(request: Request) -> Actor:
    data = request.session.get("actor")
    if not data or "id" not in data or "role" not in data:
        raise AuthenticationError()

    actor = Actor(id=int(data["id"]), role=str(data["role"]))
    request.state.actor = actor
    return actor
