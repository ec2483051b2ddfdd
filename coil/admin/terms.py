from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from coil import gating
from coil.constants.capabilities import Capability
from coil.constants.gating import TERM_GATING_FIELD, TERM_GATING_META_KEY, TERM_NONCE_ACTION, TERM_NONCE_NAME
from coil.utils.sanitize import sanitize_text_field

if TYPE_CHECKING:
    from coil.admin.context import AdminContext, AdminRequest

logger = logging.getLogger(__name__)


async def maybe_save_term_meta(term_id: int, request: AdminRequest, ctx: AdminContext) -> None:
    """Save the term's gating after the term has been updated."""
    if not ctx.authorizer.can(ctx.actor, Capability.EDIT_TERM, term_id) or not request.form.get(TERM_NONCE_NAME):
        return

    ctx.nonces.check_admin_referer(request.form, TERM_NONCE_ACTION, TERM_NONCE_NAME, ctx.actor.id)

    term_gating = sanitize_text_field(request.form.get(TERM_GATING_FIELD, ""))

    if term_gating:
        await gating.set_term_gating(ctx.meta, term_id, term_gating)
        logger.info(f"Term {term_id} gating set to {term_gating} by actor {ctx.actor.id}")
    else:
        await delete_term_monetization_meta(term_id, ctx)


async def delete_term_monetization_meta(term_id: Any, ctx: AdminContext) -> None:
    """Delete the term's gating meta; falsy ids are ignored."""
    if not term_id:
        return
    await ctx.meta.delete_term_meta(term_id, TERM_GATING_META_KEY)
