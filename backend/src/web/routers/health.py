"""
Health Router - API endpoints for health checks and service info
"""
from fastapi import APIRouter, Depends, Request

from ...store import TaskStoreBase
from ..dependencies import get_task_store

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("/live")
def health_live():
    """Liveness probe: server process is up"""
    return {"status": "live"}


@router.get("/ready")
def health_ready(store: TaskStoreBase = Depends(get_task_store)):
    """Readiness probe: the store is ready from construction on"""
    return {"status": "ready", "tasks": len(store)}


@router.get("/config")
def health_config(request: Request):
    """Public service information"""
    app_config = request.app.state.config
    return {"app_name": app_config.app_name, "version": app_config.version}
