from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from coil.hooks.names import FILTER_TAXONOMY_EXCLUDE

if TYPE_CHECKING:
    from coil.admin.context import AdminContext

DEFAULT_TAXONOMY_EXCLUDE = [
    "nav_menu",
    "link_category",
    "post_format",
]


@dataclass
class Taxonomy:
    name: str
    label: str
    object_types: list[str] = field(default_factory=list)


class TaxonomyRegistry:
    """Taxonomies registered with the host, in registration order."""

    def __init__(self) -> None:
        self._taxonomies: list[Taxonomy] = []

    def register_taxonomy(self, name: str, label: str, object_types: list[str] | None = None) -> Taxonomy:
        taxonomy = Taxonomy(name=name, label=label, object_types=object_types or [])
        self._taxonomies.append(taxonomy)
        return taxonomy

    def get_taxonomies(self) -> list[Taxonomy]:
        return list(self._taxonomies)


def register_default_taxonomies(registry: TaxonomyRegistry) -> None:
    """Register the taxonomies every host install ships with."""
    registry.register_taxonomy("category", "Categories", ["post"])
    registry.register_taxonomy("post_tag", "Tags", ["post"])
    registry.register_taxonomy("nav_menu", "Navigation Menus", ["nav_menu_item"])
    registry.register_taxonomy("link_category", "Link Categories", ["link"])
    registry.register_taxonomy("post_format", "Formats", ["post"])


def get_valid_taxonomies(ctx: AdminContext) -> list[str]:
    """
    Return the names of the taxonomies gating can be set on.

    The exclusion list can be changed with the `coil_settings_taxonomy_exclude`
    filter. Names are returned once each, in registration order.
    """
    taxonomies_exclude = ctx.hooks.apply_filters(FILTER_TAXONOMY_EXCLUDE, list(DEFAULT_TAXONOMY_EXCLUDE))

    taxonomy_options: list[str] = []
    for taxonomy in ctx.taxonomies.get_taxonomies():
        if taxonomies_exclude and taxonomy.name in taxonomies_exclude:
            continue
        if taxonomy.name not in taxonomy_options:
            taxonomy_options.append(taxonomy.name)

    return taxonomy_options
