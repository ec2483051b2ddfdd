"""
Role and Capability Constants

Maps host roles onto the capabilities the admin handlers check.
"""

from enum import Enum


class RoleName(str, Enum):
    """Enumeration of role names in the host."""

    SUBSCRIBER = "subscriber"
    CONTRIBUTOR = "contributor"
    AUTHOR = "author"
    EDITOR = "editor"
    ADMINISTRATOR = "administrator"


class Capability(str, Enum):
    """Capabilities checked by the admin handlers."""

    READ = "read"
    EDIT_POST = "edit_post"
    EDIT_TERM = "edit_term"
    MANAGE_OPTIONS = "manage_options"


ROLE_CAPABILITIES: dict[RoleName, set[Capability]] = {
    RoleName.SUBSCRIBER: {Capability.READ},
    RoleName.CONTRIBUTOR: {Capability.READ, Capability.EDIT_POST},
    RoleName.AUTHOR: {Capability.READ, Capability.EDIT_POST},
    RoleName.EDITOR: {Capability.READ, Capability.EDIT_POST, Capability.EDIT_TERM},
    RoleName.ADMINISTRATOR: set(Capability),
}


def get_role_capabilities(role: str) -> set[Capability]:
    """
    Return the capabilities granted to a role.

    Unknown roles get no capabilities.
    """
    try:
        return ROLE_CAPABILITIES[RoleName(role)]
    except ValueError:
        return set()
