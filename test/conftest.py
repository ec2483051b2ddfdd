"""
Pytest configuration and fixtures for Coil admin tests

Handlers are exercised against in-memory meta storage and a JSON theme mod
file in a temporary directory; no database is needed.
"""

import os
import sys

import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))  # noqa: PTH100, PTH118, PTH120

from coil.admin.authorization import RoleAuthorizer  # noqa: E402
from coil.admin.context import Actor, AdminContext  # noqa: E402
from coil.admin.registration import register_admin_hooks  # noqa: E402
from coil.admin.taxonomies import TaxonomyRegistry, register_default_taxonomies  # noqa: E402
from coil.config import Settings  # noqa: E402
from coil.hooks.registry import HookRegistry  # noqa: E402
from coil.services.theme_mods import ThemeModStore  # noqa: E402
from coil.utils.nonce import NonceManager  # noqa: E402
from utils.mocks import MockMetaStore, MockPostLookup, make_post  # noqa: E402

TEST_SECRET_KEY = "test-secret-key"


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    return Settings(
        secret_key=TEST_SECRET_KEY,
        theme_mods_file=str(tmp_path / "theme_mods.json"),
        script_debug=False,
        block_editor_available=True,
    )


@pytest.fixture
def meta_store() -> MockMetaStore:
    return MockMetaStore()


@pytest.fixture
def post_lookup() -> MockPostLookup:
    return MockPostLookup(
        [
            make_post(42),
            make_post(43, block_editor=True),
            make_post(50, post_type="revision", post_name="42-revision-v1", post_parent=42),
            make_post(51, post_type="revision", post_name="42-autosave-v1", post_parent=42),
        ]
    )


@pytest.fixture
def theme_mods(test_settings) -> ThemeModStore:
    return ThemeModStore(test_settings.theme_mods_file)


@pytest.fixture
def nonces() -> NonceManager:
    return NonceManager(TEST_SECRET_KEY)


@pytest.fixture
def hooks(test_settings) -> HookRegistry:
    registry = HookRegistry()
    register_admin_hooks(registry, test_settings.plugin_basename)
    return registry


@pytest.fixture
def taxonomies() -> TaxonomyRegistry:
    registry = TaxonomyRegistry()
    register_default_taxonomies(registry)
    return registry


@pytest.fixture
def make_ctx(test_settings, hooks, nonces, meta_store, post_lookup, theme_mods, taxonomies):
    """Factory for an AdminContext acting as the given role"""

    def _make_ctx(role: str = "administrator", actor_id: int = 1, **overrides) -> AdminContext:
        values = {
            "actor": Actor(id=actor_id, role=role),
            "settings": test_settings,
            "hooks": hooks,
            "authorizer": RoleAuthorizer(),
            "nonces": nonces,
            "meta": meta_store,
            "posts": post_lookup,
            "theme_mods": theme_mods,
            "taxonomies": taxonomies,
        }
        values.update(overrides)
        return AdminContext(**values)

    return _make_ctx


@pytest.fixture
def admin_ctx(make_ctx) -> AdminContext:
    return make_ctx("administrator")


@pytest.fixture
def make_client(make_ctx):
    """Factory for a test client whose admin routes run as the given role against the in-memory stores"""
    from coil.routes.admin import get_admin_context
    from main import app

    def _make_client(role: str = "administrator", actor_id: int = 1) -> TestClient:
        app.dependency_overrides[get_admin_context] = lambda: make_ctx(role, actor_id)
        return TestClient(app)

    yield _make_client
    app.dependency_overrides.clear()


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client("administrator")
