"""Links added to this plugin's row on the plugins screen."""

from __future__ import annotations

from html import escape
from typing import TYPE_CHECKING
from urllib.parse import urlencode

from coil.constants.capabilities import Capability

if TYPE_CHECKING:
    from coil.admin.context import AdminContext


def settings_page_url(ctx: AdminContext) -> str:
    return f"{ctx.settings.admin_url}admin.php?{urlencode({'page': 'coil'})}"


def add_plugin_action_links(links: dict[str, str], ctx: AdminContext) -> dict[str, str]:
    """
    Put a Settings link first in the plugin's action links.

    Existing links keep their order after it; on a key collision the
    Settings link wins.
    """
    if not ctx.authorizer.can(ctx.actor, Capability.MANAGE_OPTIONS):
        return links

    action_links = {
        "settings": (
            f'<a href="{escape(settings_page_url(ctx))}" aria-label="{escape("Settings for Coil")}">'
            f"{escape('Settings')}</a>"
        ),
    }

    merged = dict(action_links)
    for key, link in links.items():
        merged.setdefault(key, link)
    return merged


def add_plugin_meta_link(metadata: dict[str, str], file: str, ctx: AdminContext) -> dict[str, str]:
    """Append a support forum link to this plugin's row meta only."""
    if file != ctx.settings.plugin_basename:
        return metadata

    row_meta = {
        "community": f'<a href="{escape(ctx.settings.support_forum_url)}">{escape("Support forum")}</a>',
    }

    return {**metadata, **row_meta}
