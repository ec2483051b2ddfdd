import logging
from pathlib import Path

import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from starlette.middleware.sessions import SessionMiddleware

from coil.admin.authorization import RoleAuthorizer
from coil.admin.registration import register_admin_hooks
from coil.admin.taxonomies import TaxonomyRegistry, register_default_taxonomies
from coil.config import Settings, settings
from coil.exception_handlers import register_exception_handlers
from coil.hooks.registry import HookRegistry
from coil.middleware.logging import StructuredLoggingMiddleware, setup_structured_logging
from coil.routes import admin
from coil.services.theme_mods import ThemeModStore
from coil.utils.nonce import NonceManager

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "coil" / "static"


def create_app(app_settings: Settings = settings) -> FastAPI:
    """Create the FastAPI application and build the admin hook table."""
    setup_structured_logging(
        log_level="DEBUG" if app_settings.debug else "INFO",
        json_format=app_settings.environment == "production",
    )

    app = FastAPI(
        title=app_settings.app_name,
        description="Coil Web Monetization admin screens",
        debug=app_settings.debug,
        version=app_settings.plugin_version,
    )

    hooks = HookRegistry()
    register_admin_hooks(hooks, app_settings.plugin_basename)

    taxonomies = TaxonomyRegistry()
    register_default_taxonomies(taxonomies)

    app.state.settings = app_settings
    app.state.hooks = hooks
    app.state.taxonomies = taxonomies
    app.state.authorizer = RoleAuthorizer()
    app.state.nonces = NonceManager(app_settings.secret_key, app_settings.nonce_lifetime)
    app.state.theme_mods = ThemeModStore(app_settings.theme_mods_file)

    app.add_middleware(StructuredLoggingMiddleware)
    app.add_middleware(SessionMiddleware, secret_key=app_settings.secret_key)

    register_exception_handlers(app)

    app.include_router(admin.router)
    app.mount(f"{app_settings.plugin_url}assets", StaticFiles(directory=STATIC_DIR), name="coil-assets")

    if app_settings.debug:
        logger.info(f"Running in {app_settings.environment} mode")

    return app


app = create_app()


@app.get("/", tags=["Root"])
async def root():
    return {"message": f"{settings.app_name} {settings.plugin_version}"}


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=settings.debug)
