"""
Gating metabox on the post editor.

The box is only added for the classic editor; block editor posts get the
same choice from the editor sidebar.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from coil import gating
from coil.constants.gating import (
    METABOX_NONCE_ACTION,
    METABOX_NONCE_NAME,
    POST_GATING_FIELD,
    POST_GATING_META_KEY,
    SPLIT_CONTENT,
)
from coil.exceptions import PostNotFoundError
from coil.hooks.names import HOOK_AFTER_RENDER_METABOX, HOOK_BEFORE_RENDER_METABOX
from coil.templating import render
from coil.utils.sanitize import sanitize_text_field

if TYPE_CHECKING:
    from coil.admin.context import AdminContext, AdminRequest

logger = logging.getLogger(__name__)

LEGEND = "Set the type of monetization for the article."
LEGEND_SPLIT_CONTENT = (
    'Set the type of monetization for the article. Note: If "Split Content" selected, '
    "you will need to save the article and reload the editor to view the options at block level."
)


@dataclass
class MetaBox:
    """A panel registered for the post editing screen."""

    id: str
    title: str
    callback: Callable[[Any, AdminContext], Awaitable[str]]
    screens: list[str] = field(default_factory=list)
    context: str = "advanced"
    priority: str = "default"


def use_block_editor_for_post(post: Any, ctx: AdminContext) -> bool:
    """True when the host ships a block editor and this post is edited with it."""
    if not ctx.settings.block_editor_available or post is None:
        return False
    return bool(post.block_editor)


def add_metabox(post: Any, meta_boxes: list[MetaBox], ctx: AdminContext) -> None:
    """Add the Coil metabox to the content editing screen."""
    if use_block_editor_for_post(post, ctx):
        return

    meta_boxes.append(
        MetaBox(
            id="coil",
            title="Web Monetization - Coil",
            callback=render_coil_metabox,
            screens=["page", "post"],
            context="side",
            priority="high",
        )
    )


async def render_coil_metabox(post: Any, ctx: AdminContext) -> str:
    """
    Render the gating radio buttons for a post.

    The stored post gating is rendered, not the site-wide default, so the
    box reflects what is saved on this post.

    Raises:
        PostNotFoundError: no post (or a post without an id) is being edited.
    """
    if post is None or not getattr(post, "id", None):
        raise PostNotFoundError()

    post_gating = await gating.get_post_gating(ctx.meta, post.id)
    use_block_editor = use_block_editor_for_post(post, ctx)
    settings = gating.get_monetization_setting_types(True)

    if use_block_editor:
        settings[SPLIT_CONTENT] = "Split Content"

    await ctx.hooks.do_action(HOOK_BEFORE_RENDER_METABOX, dict(settings))

    html = render(
        "admin/metabox.html",
        legend=LEGEND_SPLIT_CONTENT if use_block_editor else LEGEND,
        settings=settings,
        post_gating=post_gating,
        field_name=POST_GATING_FIELD,
        nonce_name=METABOX_NONCE_NAME,
        nonce=ctx.nonces.create_nonce(METABOX_NONCE_ACTION, ctx.actor.id),
    )

    await ctx.hooks.do_action(HOOK_AFTER_RENDER_METABOX)

    return html


async def maybe_save_post_metabox(post_id: int, request: AdminRequest, ctx: AdminContext) -> None:
    """
    Save the metabox selection when a post is saved.

    A missing permission or a missing nonce makes this a no-op. A nonce that
    is present but does not verify aborts the request. An empty selection
    removes the stored gating. A selection that is not a known gating tag
    leaves the stored gating unchanged.
    """
    if not ctx.authorizer.can_edit(ctx.actor, post_id) or not request.form.get(METABOX_NONCE_NAME):
        return

    ctx.nonces.check_admin_referer(request.form, METABOX_NONCE_ACTION, METABOX_NONCE_NAME, ctx.actor.id)

    if request.doing_autosave:
        return

    post = await ctx.posts.get_post(post_id)
    if post is not None and (post.is_autosave or post.is_revision):
        return

    post_gating = sanitize_text_field(request.form.get(POST_GATING_FIELD, ""))

    if post_gating:
        await gating.set_post_gating(ctx.meta, post_id, post_gating)
        logger.info(f"Post {post_id} gating set to {post_gating} by actor {ctx.actor.id}")
    else:
        await ctx.meta.delete_post_meta(post_id, POST_GATING_META_KEY)
        logger.info(f"Post {post_id} gating cleared by actor {ctx.actor.id}")
