"""
Collaborator interfaces the admin handlers depend on.

Concrete implementations live in coil.services (SQL meta storage, JSON theme
mods) and coil.admin.authorization; tests substitute in-memory versions.
"""

from typing import Any, Protocol

from coil.constants.capabilities import Capability


class MetaStore(Protocol):
    async def get_post_meta(self, post_id: int, meta_key: str) -> str | None: ...

    async def update_post_meta(self, post_id: int, meta_key: str, meta_value: str) -> None: ...

    async def delete_post_meta(self, post_id: int, meta_key: str) -> None: ...

    async def get_term_meta(self, term_id: int, meta_key: str) -> str | None: ...

    async def update_term_meta(self, term_id: int, meta_key: str, meta_value: str) -> None: ...

    async def delete_term_meta(self, term_id: int, meta_key: str) -> None: ...


class PostLookup(Protocol):
    async def get_post(self, post_id: int) -> Any | None:
        """Return the post (with is_revision / is_autosave) or None."""
        ...


class ThemeMods(Protocol):
    def get_theme_mod(self, name: str, default: Any = False) -> Any: ...

    def set_theme_mod(self, name: str, value: Any) -> None: ...


class Authorizer(Protocol):
    def can(self, actor: Any, capability: Capability, target_id: int | None = None) -> bool: ...

    def can_edit(self, actor: Any, target_id: int) -> bool:
        """Shorthand for the edit_post check on a single post."""
        ...
