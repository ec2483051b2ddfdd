"""
Admin hook table

Every host hook the admin handlers attach to, built once when the
application is created.
"""

from __future__ import annotations

import logging

from coil.admin.assets import add_admin_body_class, load_admin_assets
from coil.admin.customizer import coil_add_customizer_options
from coil.admin.metabox import add_metabox, maybe_save_post_metabox
from coil.admin.plugin_links import add_plugin_action_links, add_plugin_meta_link
from coil.admin.terms import delete_term_monetization_meta, maybe_save_term_meta
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
from coil.hooks.registry import HookRegistry

logger = logging.getLogger(__name__)

ADMIN_ACTIONS = [
    (HOOK_ADD_META_BOXES, add_metabox),
    (HOOK_SAVE_POST, maybe_save_post_metabox),
    (HOOK_EDITED_TERM, maybe_save_term_meta),
    (HOOK_DELETE_TERM, delete_term_monetization_meta),
    (HOOK_ADMIN_ENQUEUE_SCRIPTS, load_admin_assets),
    (HOOK_CUSTOMIZE_REGISTER, coil_add_customizer_options),
]


def register_admin_hooks(hooks: HookRegistry, plugin_basename: str) -> None:
    """Attach the admin handlers to their host hooks."""
    for hook_name, callback in ADMIN_ACTIONS:
        hooks.add_action(hook_name, callback)

    hooks.add_filter(plugin_action_links_hook(plugin_basename), add_plugin_action_links)
    hooks.add_filter(FILTER_PLUGIN_ROW_META, add_plugin_meta_link)
    hooks.add_filter(FILTER_ADMIN_BODY_CLASS, add_admin_body_class)

    logger.info("Admin hooks registered (%d actions, 3 filters)", len(ADMIN_ACTIONS))
