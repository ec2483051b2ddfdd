"""
Coil admin screens and options.

Public API:
    AdminContext, AdminRequest, Actor, Screen - request-scoped handler inputs
    register_admin_hooks                      - attach handlers to host hooks
    get_customizer_messaging_text             - customizer message lookup
    get_valid_taxonomies                      - taxonomies gating can apply to
"""

from .context import Actor, AdminContext, AdminRequest, Screen
from .customizer import get_customizer_messaging_text
from .registration import register_admin_hooks
from .taxonomies import get_valid_taxonomies

__all__ = [
    "Actor",
    "AdminContext",
    "AdminRequest",
    "Screen",
    "get_customizer_messaging_text",
    "get_valid_taxonomies",
    "register_admin_hooks",
]
