"""
Gating storage

Reads and writes the gating tag stored against a post or a term. Only tags
offered by get_monetization_setting_types() (plus split content for posts)
are accepted; anything else is ignored.
"""

from __future__ import annotations

import logging

from coil.constants.gating import POST_GATING_META_KEY, SPLIT_CONTENT, TERM_GATING_META_KEY, GatingType
from coil.ports import MetaStore

logger = logging.getLogger(__name__)


def get_monetization_setting_types(show_default: bool = False) -> dict[str, str]:
    """
    Return the selectable gating tags mapped to their labels, in display order.

    Args:
        show_default: Prepend the "Use Default" option.
    """
    settings: dict[str, str] = {}
    if show_default:
        settings[GatingType.DEFAULT.value] = "Use Default"

    settings[GatingType.NO_MONETIZATION.value] = "No Monetization"
    settings[GatingType.MONETIZED_PUBLIC.value] = "Monetized and Public"
    settings[GatingType.SUBSCRIBERS_ONLY.value] = "Subscribers Only"
    return settings


async def get_post_gating(meta: MetaStore, post_id: int) -> str | None:
    """Return the gating tag stored on the post, or None when the post is ungated."""
    return await meta.get_post_meta(post_id, POST_GATING_META_KEY) or None


async def set_post_gating(meta: MetaStore, post_id: int, gating_type: str) -> None:
    valid_options = list(get_monetization_setting_types(True))
    valid_options.append(SPLIT_CONTENT)

    if gating_type not in valid_options:
        logger.info(f"Ignoring unknown gating type {gating_type!r} for post {post_id}")
        return

    await meta.update_post_meta(post_id, POST_GATING_META_KEY, gating_type)


async def get_term_gating(meta: MetaStore, term_id: int) -> str | None:
    """Return the gating tag stored on the term, or None when the term is ungated."""
    return await meta.get_term_meta(term_id, TERM_GATING_META_KEY) or None


async def set_term_gating(meta: MetaStore, term_id: int, gating_type: str) -> None:
    valid_options = list(get_monetization_setting_types(True))

    if gating_type not in valid_options:
        logger.info(f"Ignoring unknown gating type {gating_type!r} for term {term_id}")
        return

    await meta.update_term_meta(term_id, TERM_GATING_META_KEY, gating_type)
