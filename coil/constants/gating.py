"""
Gating Constants

Meta keys, form field names and nonce names shared by the metabox and the
term edit screen.
"""

from enum import Enum


class GatingType(str, Enum):
    """Gating tags that can be stored against a post or a term."""

    DEFAULT = "default"
    NO_MONETIZATION = "no"
    MONETIZED_PUBLIC = "no-gating"
    SUBSCRIBERS_ONLY = "gate-all"
    SPLIT_CONTENT = "gate-tagged-blocks"


SPLIT_CONTENT = GatingType.SPLIT_CONTENT.value

# Meta storage keys
POST_GATING_META_KEY = "_coil_monetize_post_status"
TERM_GATING_META_KEY = "_coil_monetize_term_status"

# Submitted form fields
POST_GATING_FIELD = "coil_monetize_post_status"
TERM_GATING_FIELD = "coil_monetize_term_status"

# Nonces
METABOX_NONCE_ACTION = "coil_metabox_nonce_action"
METABOX_NONCE_NAME = "coil_metabox_nonce"
TERM_NONCE_ACTION = "coil_term_gating_nonce_action"
TERM_NONCE_NAME = "term_gating_nonce"
