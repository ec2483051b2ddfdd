"""
Tests for the gating metabox: visibility, rendering and saving.
"""

import re

import pytest

from coil.admin.context import AdminRequest
from coil.admin.metabox import (
    LEGEND,
    LEGEND_SPLIT_CONTENT,
    add_metabox,
    maybe_save_post_metabox,
    render_coil_metabox,
    use_block_editor_for_post,
)
from coil.constants.gating import METABOX_NONCE_ACTION, METABOX_NONCE_NAME, POST_GATING_FIELD, POST_GATING_META_KEY
from coil.exceptions import NonceVerificationError, PostNotFoundError
from coil.hooks.names import HOOK_AFTER_RENDER_METABOX, HOOK_BEFORE_RENDER_METABOX
from utils.mocks import make_post


def _valid_form(nonces, value: str | None = "gate-all", actor_id: int = 1) -> dict[str, str]:
    form = {METABOX_NONCE_NAME: nonces.create_nonce(METABOX_NONCE_ACTION, actor_id)}
    if value is not None:
        form[POST_GATING_FIELD] = value
    return form


class TestAddMetabox:
    def test_shown_for_classic_editor_post(self, admin_ctx):
        meta_boxes = []
        add_metabox(make_post(42, block_editor=False), meta_boxes, admin_ctx)

        assert len(meta_boxes) == 1
        box = meta_boxes[0]
        assert box.id == "coil"
        assert box.title == "Web Monetization - Coil"
        assert box.screens == ["page", "post"]
        assert box.context == "side"
        assert box.priority == "high"
        assert box.callback is render_coil_metabox

    def test_hidden_for_block_editor_post(self, admin_ctx):
        meta_boxes = []
        add_metabox(make_post(43, block_editor=True), meta_boxes, admin_ctx)

        assert meta_boxes == []

    def test_shown_when_host_has_no_block_editor(self, make_ctx, test_settings):
        ctx = make_ctx(settings=test_settings.model_copy(update={"block_editor_available": False}))
        meta_boxes = []
        add_metabox(make_post(43, block_editor=True), meta_boxes, ctx)

        assert len(meta_boxes) == 1

    def test_use_block_editor_without_post(self, admin_ctx):
        assert use_block_editor_for_post(None, admin_ctx) is False


class TestRenderMetabox:
    @pytest.mark.asyncio
    async def test_preselects_stored_gating(self, admin_ctx, meta_store):
        meta_store.post_meta[(42, POST_GATING_META_KEY)] = "gate-all"

        html = await render_coil_metabox(make_post(42), admin_ctx)

        assert html.count('checked="checked"') == 1
        assert 'value="gate-all" checked="checked"' in html

    @pytest.mark.asyncio
    async def test_nothing_selected_when_ungated(self, admin_ctx):
        html = await render_coil_metabox(make_post(42), admin_ctx)

        assert 'checked="checked"' not in html
        for option in ("default", "no", "no-gating", "gate-all"):
            assert f'value="{option}"' in html

    @pytest.mark.asyncio
    async def test_classic_editor_options_and_legend(self, admin_ctx):
        html = await render_coil_metabox(make_post(42, block_editor=False), admin_ctx)

        assert 'value="gate-tagged-blocks"' not in html
        assert html.count('type="radio"') == 4
        assert "Set the type of monetization for the article.</legend>" in html
        assert "Split Content" not in html
        assert LEGEND in html

    @pytest.mark.asyncio
    async def test_block_editor_adds_split_content(self, admin_ctx):
        html = await render_coil_metabox(make_post(43, block_editor=True), admin_ctx)

        assert 'value="gate-tagged-blocks"' in html
        assert html.count('type="radio"') == 5
        # The legend's quotes are HTML-escaped
        assert "reload the editor to view the options at block level." in html
        assert LEGEND_SPLIT_CONTENT not in html

    @pytest.mark.asyncio
    async def test_radios_share_field_name(self, admin_ctx):
        html = await render_coil_metabox(make_post(42), admin_ctx)

        assert html.count(f'name="{POST_GATING_FIELD}"') == 4

    @pytest.mark.asyncio
    async def test_emits_verifiable_nonce(self, admin_ctx, nonces):
        html = await render_coil_metabox(make_post(42), admin_ctx)

        match = re.search(rf'name="{METABOX_NONCE_NAME}" value="([^"]+)"', html)
        assert match is not None
        assert nonces.verify_nonce(match.group(1), METABOX_NONCE_ACTION, admin_ctx.actor.id)

    @pytest.mark.asyncio
    async def test_fires_render_hooks(self, admin_ctx, hooks):
        fired = []
        hooks.add_action(HOOK_BEFORE_RENDER_METABOX, lambda settings: fired.append(("before", list(settings))))
        hooks.add_action(HOOK_AFTER_RENDER_METABOX, lambda: fired.append(("after", None)))

        await render_coil_metabox(make_post(42), admin_ctx)

        assert fired == [("before", ["default", "no", "no-gating", "gate-all"]), ("after", None)]

    @pytest.mark.asyncio
    async def test_requires_post(self, admin_ctx):
        with pytest.raises(PostNotFoundError):
            await render_coil_metabox(None, admin_ctx)

    @pytest.mark.asyncio
    async def test_requires_post_id(self, admin_ctx):
        with pytest.raises(PostNotFoundError):
            await render_coil_metabox(make_post(0), admin_ctx)


class TestMaybeSavePostMetabox:
    @pytest.mark.asyncio
    async def test_writes_submitted_value(self, admin_ctx, nonces, meta_store):
        await maybe_save_post_metabox(42, AdminRequest(form=_valid_form(nonces, "gate-all")), admin_ctx)

        assert meta_store.calls == [("update_post_meta", 42, POST_GATING_META_KEY, "gate-all")]

    @pytest.mark.asyncio
    async def test_writes_sanitized_value(self, admin_ctx, nonces, meta_store):
        form = _valid_form(nonces, "  <strong>no-gating</strong>\n")
        await maybe_save_post_metabox(42, AdminRequest(form=form), admin_ctx)

        assert meta_store.calls == [("update_post_meta", 42, POST_GATING_META_KEY, "no-gating")]

    @pytest.mark.asyncio
    async def test_empty_value_deletes_meta(self, admin_ctx, nonces, meta_store):
        meta_store.post_meta[(42, POST_GATING_META_KEY)] = "gate-all"

        await maybe_save_post_metabox(42, AdminRequest(form=_valid_form(nonces, "")), admin_ctx)

        assert meta_store.calls == [("delete_post_meta", 42, POST_GATING_META_KEY)]
        assert (42, POST_GATING_META_KEY) not in meta_store.post_meta

    @pytest.mark.asyncio
    async def test_missing_value_deletes_meta(self, admin_ctx, nonces, meta_store):
        await maybe_save_post_metabox(42, AdminRequest(form=_valid_form(nonces, None)), admin_ctx)

        assert meta_store.calls == [("delete_post_meta", 42, POST_GATING_META_KEY)]

    @pytest.mark.asyncio
    async def test_unknown_value_keeps_stored_gating(self, admin_ctx, nonces, meta_store):
        meta_store.post_meta[(42, POST_GATING_META_KEY)] = "gate-all"

        await maybe_save_post_metabox(42, AdminRequest(form=_valid_form(nonces, "paywall")), admin_ctx)

        assert meta_store.calls == []
        assert meta_store.post_meta[(42, POST_GATING_META_KEY)] == "gate-all"

    @pytest.mark.asyncio
    async def test_noop_without_capability(self, make_ctx, nonces, meta_store):
        ctx = make_ctx("subscriber")

        await maybe_save_post_metabox(42, AdminRequest(form=_valid_form(nonces)), ctx)

        assert meta_store.calls == []

    @pytest.mark.asyncio
    async def test_noop_without_nonce(self, admin_ctx, meta_store):
        await maybe_save_post_metabox(42, AdminRequest(form={POST_GATING_FIELD: "gate-all"}), admin_ctx)

        assert meta_store.calls == []

    @pytest.mark.asyncio
    async def test_noop_with_empty_nonce(self, admin_ctx, meta_store):
        form = {METABOX_NONCE_NAME: "", POST_GATING_FIELD: "gate-all"}
        await maybe_save_post_metabox(42, AdminRequest(form=form), admin_ctx)

        assert meta_store.calls == []

    @pytest.mark.asyncio
    async def test_invalid_nonce_aborts(self, admin_ctx, meta_store):
        form = {METABOX_NONCE_NAME: "not-a-real-nonce", POST_GATING_FIELD: "gate-all"}

        with pytest.raises(NonceVerificationError):
            await maybe_save_post_metabox(42, AdminRequest(form=form), admin_ctx)

        assert meta_store.calls == []

    @pytest.mark.asyncio
    async def test_nonce_for_other_actor_aborts(self, admin_ctx, nonces, meta_store):
        with pytest.raises(NonceVerificationError):
            await maybe_save_post_metabox(42, AdminRequest(form=_valid_form(nonces, actor_id=99)), admin_ctx)

        assert meta_store.calls == []

    @pytest.mark.asyncio
    async def test_noop_during_autosave(self, admin_ctx, nonces, meta_store):
        request = AdminRequest(form=_valid_form(nonces), doing_autosave=True)

        await maybe_save_post_metabox(42, request, admin_ctx)

        assert meta_store.calls == []

    @pytest.mark.asyncio
    async def test_noop_for_revision(self, admin_ctx, nonces, meta_store, post_lookup):
        post_lookup.add(make_post(42, post_type="revision", post_name="41-revision-v1", post_parent=41))

        await maybe_save_post_metabox(42, AdminRequest(form=_valid_form(nonces)), admin_ctx)

        assert meta_store.calls == []

    @pytest.mark.asyncio
    async def test_noop_for_autosave_post(self, admin_ctx, nonces, meta_store):
        await maybe_save_post_metabox(51, AdminRequest(form=_valid_form(nonces)), admin_ctx)

        assert meta_store.calls == []
