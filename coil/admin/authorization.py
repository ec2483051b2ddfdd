import logging
from typing import Any

from coil.constants.capabilities import Capability, get_role_capabilities

logger = logging.getLogger(__name__)


class RoleAuthorizer:
    """
    Grants capabilities by role.

    The host has no per-object ownership rules, so `target_id` does not
    narrow the check.
    """

    def can(self, actor: Any, capability: Capability, target_id: int | None = None) -> bool:
        if actor is None:
            return False
        allowed = capability in get_role_capabilities(actor.role)
        if not allowed:
            logger.debug(f"Actor {actor.id} ({actor.role}) lacks {capability.value} on {target_id}")
        return allowed

    def can_edit(self, actor: Any, target_id: int) -> bool:
        return self.can(actor, Capability.EDIT_POST, target_id)
