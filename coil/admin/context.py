"""
Request-scoped context handed to every admin handler.

Handlers receive the acting user, the current screen and their collaborators
explicitly instead of reading process-wide globals.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from coil.admin.assets import StyleQueue

if TYPE_CHECKING:
    from coil.admin.taxonomies import TaxonomyRegistry
    from coil.config import Settings
    from coil.hooks.registry import HookRegistry
    from coil.ports import Authorizer, MetaStore, PostLookup, ThemeMods
    from coil.utils.nonce import NonceManager


@dataclass
class Actor:
    """The logged-in user performing the request."""

    id: int
    role: str


@dataclass
class Screen:
    """The admin screen being rendered, e.g. "post" or "toplevel_page_coil"."""

    id: str


@dataclass
class AdminRequest:
    """
    Submitted request data.

    Attributes:
        form:            Submitted form fields (string values only).
        doing_autosave:  True for background autosave requests from the editor.
    """

    form: Mapping[str, Any] = field(default_factory=dict)
    doing_autosave: bool = False


@dataclass
class AdminContext:
    actor: Actor
    settings: Settings
    hooks: HookRegistry
    authorizer: Authorizer
    nonces: NonceManager
    meta: MetaStore
    posts: PostLookup
    theme_mods: ThemeMods
    taxonomies: TaxonomyRegistry
    styles: StyleQueue = field(default_factory=StyleQueue)
    screen: Screen | None = None
