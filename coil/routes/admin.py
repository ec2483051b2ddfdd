"""
Admin Routes

HTTP entry points for the admin screens. Each route builds the request
context and fires the host hook the handlers are attached to.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, Response
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from coil import gating
from coil.admin.assets import SETTINGS_SCREEN_ID
from coil.admin.context import Actor, AdminContext, AdminRequest, Screen
from coil.admin.customizer import MESSAGE_DEFAULTS, CustomizeManager, get_customizer_messaging_text, save_customizer_setting
from coil.admin.metabox import MetaBox
from coil.admin.taxonomies import get_valid_taxonomies
from coil.auth import get_current_actor
from coil.database import get_db
from coil.constants.capabilities import Capability
from coil.exceptions import AuthorizationError, PostNotFoundError
from coil.hooks.names import (
    FILTER_ADMIN_BODY_CLASS,
    FILTER_PLUGIN_ROW_META,
    HOOK_ADD_META_BOXES,
    HOOK_ADMIN_ENQUEUE_SCRIPTS,
    HOOK_CUSTOMIZE_REGISTER,
    HOOK_DELETE_TERM,
    HOOK_EDITED_TERM,
    HOOK_SAVE_POST,
    plugin_action_links_hook,
)
from coil.services.meta_service import MetaService
from coil.services.post_service import PostService
from coil.templating import render

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["Admin"])


class CustomizerSettingUpdate(BaseModel):
    """Schema for saving a customizer value."""

    value: str


async def get_admin_context(
    request: Request,
    actor: Actor = Depends(get_current_actor),
    db: AsyncSession = Depends(get_db),
) -> AdminContext:
    state = request.app.state
    return AdminContext(
        actor=actor,
        settings=state.settings,
        hooks=state.hooks,
        authorizer=state.authorizer,
        nonces=state.nonces,
        meta=MetaService(db),
        posts=PostService(db),
        theme_mods=state.theme_mods,
        taxonomies=state.taxonomies,
    )


async def _read_form(request: Request) -> dict[str, str]:
    form = await request.form()
    return {key: value for key, value in form.items() if isinstance(value, str)}


async def _build_customizer(ctx: AdminContext) -> CustomizeManager:
    manager = CustomizeManager()
    await ctx.hooks.do_action(HOOK_CUSTOMIZE_REGISTER, manager, ctx)
    return manager


# ── Post editor ───────────────────────────────────────────────────────────────


@router.get("/posts/{post_id}/edit", response_class=HTMLResponse)
async def edit_post_screen(post_id: int, ctx: AdminContext = Depends(get_admin_context)) -> HTMLResponse:
    """Render the post editing screen with its metaboxes."""
    post = await ctx.posts.get_post(post_id)
    if post is None:
        raise PostNotFoundError(post_id)

    ctx.screen = Screen(id=post.post_type)
    await ctx.hooks.do_action(HOOK_ADMIN_ENQUEUE_SCRIPTS, ctx)

    meta_boxes: list[MetaBox] = []
    await ctx.hooks.do_action(HOOK_ADD_META_BOXES, post, meta_boxes, ctx)

    rendered = []
    for box in meta_boxes:
        if post.post_type not in box.screens:
            continue
        rendered.append(
            {"id": box.id, "title": box.title, "context": box.context, "html": await box.callback(post, ctx)}
        )

    html = render(
        "admin/edit_post.html",
        post=post,
        styles=ctx.styles.render(),
        body_class=ctx.hooks.apply_filters(FILTER_ADMIN_BODY_CLASS, "", ctx),
        action=f"/admin/posts/{post_id}",
        meta_boxes=rendered,
    )
    return HTMLResponse(html)


@router.post("/posts/{post_id}")
async def save_post(
    post_id: int,
    request: Request,
    autosave: bool = False,
    ctx: AdminContext = Depends(get_admin_context),
) -> dict[str, Any]:
    """Fire the save hooks for a submitted post form."""
    admin_request = AdminRequest(form=await _read_form(request), doing_autosave=autosave)
    await ctx.hooks.do_action(HOOK_SAVE_POST, post_id, admin_request, ctx)

    return {"post_id": post_id, "gating": await gating.get_post_gating(ctx.meta, post_id)}


# ── Terms ─────────────────────────────────────────────────────────────────────


@router.post("/terms/{term_id}")
async def save_term(
    term_id: int,
    request: Request,
    ctx: AdminContext = Depends(get_admin_context),
) -> dict[str, Any]:
    """Fire the term update hooks for a submitted term form."""
    admin_request = AdminRequest(form=await _read_form(request))
    await ctx.hooks.do_action(HOOK_EDITED_TERM, term_id, admin_request, ctx)

    return {"term_id": term_id, "gating": await gating.get_term_gating(ctx.meta, term_id)}


@router.delete("/terms/{term_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_term(term_id: int, ctx: AdminContext = Depends(get_admin_context)) -> Response:
    """Fire the term deletion hooks; deleting a term requires edit_term."""
    if not ctx.authorizer.can(ctx.actor, Capability.EDIT_TERM, term_id):
        raise AuthorizationError(required_permission=Capability.EDIT_TERM.value)

    await ctx.hooks.do_action(HOOK_DELETE_TERM, term_id, ctx)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ── Plugins screen ────────────────────────────────────────────────────────────


@router.get("/plugins")
async def plugin_row(ctx: AdminContext = Depends(get_admin_context)) -> dict[str, Any]:
    """Action links and row meta for this plugin on the plugins screen."""
    ctx.screen = Screen(id="plugins")
    basename = ctx.settings.plugin_basename

    action_links = ctx.hooks.apply_filters(
        plugin_action_links_hook(basename),
        {"deactivate": f'<a href="plugins.php?action=deactivate&amp;plugin={basename}">Deactivate</a>'},
        ctx,
    )
    row_meta = ctx.hooks.apply_filters(
        FILTER_PLUGIN_ROW_META,
        {"version": f"Version {ctx.settings.plugin_version}"},
        basename,
        ctx,
    )
    return {"plugin": basename, "action_links": action_links, "row_meta": row_meta}


# ── Settings screen ───────────────────────────────────────────────────────────


@router.get("/settings", response_class=HTMLResponse)
async def settings_screen(ctx: AdminContext = Depends(get_admin_context)) -> HTMLResponse:
    """The Coil top-level settings screen."""
    ctx.screen = Screen(id=SETTINGS_SCREEN_ID)
    await ctx.hooks.do_action(HOOK_ADMIN_ENQUEUE_SCRIPTS, ctx)

    html = render(
        "admin/settings_page.html",
        styles=ctx.styles.render(),
        body_class=ctx.hooks.apply_filters(FILTER_ADMIN_BODY_CLASS, "", ctx),
        messages={
            message_id: get_customizer_messaging_text(message_id, ctx.theme_mods) for message_id in MESSAGE_DEFAULTS
        },
        taxonomies=get_valid_taxonomies(ctx),
    )
    return HTMLResponse(html)


@router.get("/taxonomies")
async def list_taxonomies(ctx: AdminContext = Depends(get_admin_context)) -> dict[str, Any]:
    return {"taxonomies": get_valid_taxonomies(ctx)}


# ── Customizer ────────────────────────────────────────────────────────────────


@router.get("/customizer")
async def get_customizer(ctx: AdminContext = Depends(get_admin_context)) -> dict[str, Any]:
    """Panels, sections, settings and controls registered for the customizer."""
    manager = await _build_customizer(ctx)
    return manager.as_dict()


@router.put("/customizer/settings/{setting_id}")
async def update_customizer_setting(
    setting_id: str,
    data: CustomizerSettingUpdate,
    ctx: AdminContext = Depends(get_admin_context),
) -> dict[str, Any]:
    manager = await _build_customizer(ctx)
    value = save_customizer_setting(manager, setting_id, data.value, ctx)
    return {"setting_id": setting_id, "value": value}


@router.get("/messages/{message_id}")
async def get_message(message_id: str, ctx: AdminContext = Depends(get_admin_context)) -> dict[str, Any]:
    """The message visitors see, with the default applied."""
    return {"message_id": message_id, "text": get_customizer_messaging_text(message_id, ctx.theme_mods)}
