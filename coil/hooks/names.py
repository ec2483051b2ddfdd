"""
Hook Name Constants

Host extension points the admin handlers attach to, and the hooks this plugin
fires for other code to extend.
"""

from __future__ import annotations

# ── Host actions ──────────────────────────────────────────────────────────────
HOOK_ADD_META_BOXES = "add_meta_boxes"
HOOK_SAVE_POST = "save_post"
HOOK_EDITED_TERM = "edited_term"
HOOK_DELETE_TERM = "delete_term"
HOOK_ADMIN_ENQUEUE_SCRIPTS = "admin_enqueue_scripts"
HOOK_CUSTOMIZE_REGISTER = "customize_register"

# ── Host filters ──────────────────────────────────────────────────────────────
FILTER_PLUGIN_ACTION_LINKS = "plugin_action_links"
FILTER_PLUGIN_ROW_META = "plugin_row_meta"
FILTER_ADMIN_BODY_CLASS = "admin_body_class"

# ── Hooks fired by this plugin ────────────────────────────────────────────────
HOOK_BEFORE_RENDER_METABOX = "coil_before_render_metabox"
HOOK_AFTER_RENDER_METABOX = "coil_after_render_metabox"
FILTER_SETTINGS_CAPABILITY = "coil_settings_capability"
FILTER_TAXONOMY_EXCLUDE = "coil_settings_taxonomy_exclude"


def plugin_action_links_hook(plugin_basename: str) -> str:
    """Per-plugin action links filter name, e.g. `plugin_action_links_coil-monetize-content/plugin.php`."""
    return f"{FILTER_PLUGIN_ACTION_LINKS}_{plugin_basename}"
