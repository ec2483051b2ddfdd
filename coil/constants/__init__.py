"""Constants package for Coil admin screens."""

from .capabilities import ROLE_CAPABILITIES, Capability, RoleName, get_role_capabilities
from .gating import (
    METABOX_NONCE_ACTION,
    METABOX_NONCE_NAME,
    POST_GATING_FIELD,
    POST_GATING_META_KEY,
    SPLIT_CONTENT,
    TERM_GATING_FIELD,
    TERM_GATING_META_KEY,
    TERM_NONCE_ACTION,
    TERM_NONCE_NAME,
    GatingType,
)

__all__ = [
    # Capabilities
    "Capability",
    "RoleName",
    "ROLE_CAPABILITIES",
    "get_role_capabilities",
    # Gating
    "GatingType",
    "SPLIT_CONTENT",
    "POST_GATING_META_KEY",
    "TERM_GATING_META_KEY",
    "POST_GATING_FIELD",
    "TERM_GATING_FIELD",
    "METABOX_NONCE_ACTION",
    "METABOX_NONCE_NAME",
    "TERM_NONCE_ACTION",
    "TERM_NONCE_NAME",
]
