"""
FastAPI application entry point.
"""

import logging

from fastapi import Depends, FastAPI, Request, status
from fastapi.openapi.utils import get_openapi
from fastapi.responses import RedirectResponse

from gymdesk.api import (
    home,
    auth,
    dashboard,
    admin,
    members,
    exercises,
    workouts,
    assignments,
)
from gymdesk.core.config import settings
from gymdesk.core.errors import PageRedirect
from gymdesk.utils.auth import require_admin

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title=f"{settings.app_name} API",
    description="Gym management: exercises, workouts and member assignments",
    version="1.0.0",
    docs_url="/docs",  # Swagger UI at /docs
    redoc_url="/redoc",  # ReDoc at /redoc
    openapi_url="/openapi.json",  # OpenAPI JSON schema
)


def custom_openapi():
    """Custom OpenAPI schema with security schemes."""
    if app.openapi_schema:
        return app.openapi_schema

    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
    )

    openapi_schema.setdefault("components", {})["securitySchemes"] = {
        "Bearer": {
            "type": "http",
            "scheme": "bearer",
            "bearerFormat": "JWT",
            "description": "Enter your JWT token. Get it from /auth/login endpoint.",
        }
    }

    app.openapi_schema = openapi_schema
    return app.openapi_schema


app.openapi = custom_openapi


@app.exception_handler(PageRedirect)
async def page_redirect_handler(request: Request, exc: PageRedirect):
    """Send the caller to another page."""
    logger.debug(f"[REDIRECT] {request.url.path} -> {exc.location}")
    return RedirectResponse(url=exc.location, status_code=status.HTTP_303_SEE_OTHER)


admin_only = [Depends(require_admin)]

app.include_router(home.router, tags=["home"])
app.include_router(auth.router, prefix="/auth", tags=["auth"])
app.include_router(dashboard.router, tags=["member"])
app.include_router(admin.router, prefix="/admin", tags=["admin"], dependencies=admin_only)
app.include_router(
    members.router, prefix="/admin", tags=["members"], dependencies=admin_only
)
app.include_router(
    exercises.router, prefix="/admin", tags=["exercises"], dependencies=admin_only
)
app.include_router(
    workouts.router, prefix="/admin", tags=["workouts"], dependencies=admin_only
)
app.include_router(
    assignments.router, prefix="/admin", tags=["assignments"], dependencies=admin_only
)


@app.get("/health")
def health():
    """Health check endpoint."""
    return {"status": "ok"}
