from fastapi import APIRouter

from app.api.v1.endpoints.health import router as health_router
from app.api.v1.endpoints.sequestration import router as sequestration_router


api_v1_router = APIRouter(prefix="/api/v1")

# Register endpoint groups
api_v1_router.include_router(health_router, tags=["health"])
api_v1_router.include_router(sequestration_router, tags=["sequestration"])
