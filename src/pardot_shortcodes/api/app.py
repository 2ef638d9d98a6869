from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pardot_shortcodes.api.dependencies import HandlerDep, lifespan
from pardot_shortcodes.config import settings
from pardot_shortcodes.dto import (
    DynamicContentShortcodeRequest,
    FormShortcodeRequest,
    HealthCheckResponse,
    RefreshResponse,
    ShortcodeResponse,
)

app = FastAPI(
    title="Pardot Shortcode API",
    description="Resolves Pardot form and dynamic content shortcodes to embed markup",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,  # type: ignore[arg-type]
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root() -> dict[str, Any]:
    """Root endpoint with API information."""
    return {
        "name": "Pardot Shortcode API",
        "version": "0.1.0",
        "description": "Resolves Pardot form and dynamic content shortcodes to embed markup",
        "endpoints": {
            "form": "/shortcodes/form",
            "dynamic_content": "/shortcodes/dynamic-content",
            "refresh": "/catalog/refresh",
            "health": "/health",
            "docs": "/docs",
        },
    }


@app.get("/health", response_model=HealthCheckResponse)
async def health(handler: HandlerDep) -> HealthCheckResponse:
    """Health check endpoint."""
    return await handler.health_check()


@app.post("/shortcodes/form", response_model=ShortcodeResponse)
async def render_form(request: FormShortcodeRequest, handler: HandlerDep) -> ShortcodeResponse:
    """
    Render a Pardot form shortcode.

    Args:
        request: Form title plus optional height, width and classes.

    Returns:
        The embed markup (empty if the form could not be resolved).
    """
    return await handler.render_form(request)


@app.post("/shortcodes/dynamic-content", response_model=ShortcodeResponse)
async def render_dynamic_content(
    request: DynamicContentShortcodeRequest, handler: HandlerDep
) -> ShortcodeResponse:
    """
    Render a Pardot dynamic content shortcode.

    Args:
        request: Dynamic content name plus optional height, width and classes.

    Returns:
        The embed markup (empty if the content could not be resolved).
    """
    return await handler.render_dynamic_content(request)


@app.post("/catalog/refresh", response_model=RefreshResponse)
async def refresh_catalogs(handler: HandlerDep) -> RefreshResponse:
    """Fetch both catalogs from Pardot and replace the cached copies."""
    return await handler.refresh_catalogs()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "pardot_shortcodes.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
