"""FastAPI application."""

from fastapi import FastAPI

from tripcal.api.routes.calendar import router as calendar_router
from tripcal.api.routes.health import router as health_router

app = FastAPI(title="Trip Calendar API", version="0.1.0")

# Register routes
app.include_router(health_router, tags=["health"])
app.include_router(calendar_router, tags=["calendar"])


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"message": "Trip Calendar API", "version": "0.1.0"}
