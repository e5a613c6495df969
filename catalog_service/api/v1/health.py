"""
==============================================================================
Health Check Endpoints
==============================================================================

System health status endpoints for monitoring and orchestration.

==============================================================================
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from catalog_service.core.dependencies import get_store
from catalog_service.store.base import ProductStore, StoreError


router = APIRouter(prefix="/health", tags=["Health"])


class HealthController:
    """Controller for health check operations."""

    def __init__(self, store: ProductStore):
        self._store = store

    def check_store(self) -> dict:
        """Check store connectivity and size."""
        if not self._store.ping():
            return {"status": "unhealthy", "products": None}
        try:
            return {"status": "healthy", "products": len(self._store.list())}
        except StoreError:
            return {"status": "unhealthy", "products": None}

    def get_health(self) -> dict:
        """Get full health status."""
        store_info = self.check_store()
        overall = "healthy" if store_info["status"] == "healthy" else "degraded"

        return {
            "status": overall,
            "components": {
                "api": "healthy",
                "store": store_info["status"],
            },
            "details": {
                "store_backend": self._store.backend,
                "products": store_info["products"],
            }
        }


@router.get("")
def health_check(store: ProductStore = Depends(get_store)):
    """
    Health check endpoint.

    Returns API and product store status.
    """
    return HealthController(store).get_health()


@router.get("/ready")
def readiness_check(store: ProductStore = Depends(get_store)):
    """
    Readiness probe for container orchestration.

    Ready once the product store answers; 503 otherwise.
    """
    if store.ping():
        return {"ready": True}
    return JSONResponse(status_code=503, content={"ready": False})


@router.get("/live")
async def liveness_check():
    """Liveness probe for container orchestration."""
    return {"alive": True}
