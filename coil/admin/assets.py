"""Admin-only stylesheets and the admin body class."""

from __future__ import annotations

from dataclasses import dataclass, field
from html import escape
from typing import TYPE_CHECKING
from urllib.parse import urlencode

if TYPE_CHECKING:
    from coil.admin.context import AdminContext

SETTINGS_SCREEN_ID = "toplevel_page_coil"

LOAD_ON_SCREENS = [
    SETTINGS_SCREEN_ID,
]


@dataclass
class EnqueuedStyle:
    handle: str
    src: str
    deps: list[str] = field(default_factory=list)
    version: str | None = None

    @property
    def url(self) -> str:
        if not self.version:
            return self.src
        return f"{self.src}?{urlencode({'ver': self.version})}"


class StyleQueue:
    """Stylesheets to print in the admin page head, keyed by handle."""

    def __init__(self) -> None:
        self._styles: dict[str, EnqueuedStyle] = {}

    def enqueue_style(self, handle: str, src: str, deps: list[str] | None = None, version: str | None = None) -> None:
        # First registration of a handle wins
        if handle in self._styles:
            return
        self._styles[handle] = EnqueuedStyle(handle=handle, src=src, deps=deps or [], version=version)

    def is_enqueued(self, handle: str) -> bool:
        return handle in self._styles

    def get(self, handle: str) -> EnqueuedStyle | None:
        return self._styles.get(handle)

    def all(self) -> list[EnqueuedStyle]:
        return list(self._styles.values())

    def render(self) -> str:
        return "\n".join(
            f"<link rel='stylesheet' id='{escape(style.handle)}-css' href='{escape(style.url)}' media='all' />"
            for style in self._styles.values()
        )


def add_admin_body_class(classes: str, ctx: AdminContext) -> str:
    """Use the `coil` body class on the Coil settings screen."""
    screen = ctx.screen
    if screen is None:
        return classes

    if screen.id == SETTINGS_SCREEN_ID:
        classes = " coil "

    return classes


def load_admin_assets(ctx: AdminContext) -> None:
    """Enqueue the admin stylesheet on the Coil settings screen."""
    screen = ctx.screen
    if screen is None:
        return

    if screen.id not in LOAD_ON_SCREENS:
        return

    suffix = "" if ctx.settings.script_debug else ".min"

    ctx.styles.enqueue_style(
        "coil_admin",
        f"{ctx.settings.plugin_url}assets/css/admin/coil{suffix}.css",
        [],
        ctx.settings.plugin_version,
    )
