"""
==============================================================================
Health Check Endpoints
==============================================================================

System health status endpoints for monitoring and orchestration.

==============================================================================
"""

from fastapi import APIRouter, Depends

from catalog_app.core.dependencies import get_database_manager
from catalog_app.db.database import DatabaseManager
from catalog_app.db.seeder import DatabaseSeeder


router = APIRouter(prefix="/health", tags=["Health"])


class HealthController:
    """Controller for health check operations."""

    def __init__(self, db_manager: DatabaseManager):
        self._db_manager = db_manager

    async def check_database(self) -> str:
        """Check database connectivity."""
        if await self._db_manager.verify_connection():
            return "healthy"
        return "unhealthy"

    async def get_health(self) -> dict:
        """Get full health status."""
        db_status = await self.check_database()

        health = {
            "status": "healthy" if db_status == "healthy" else "degraded",
            "components": {
                "api": "healthy",
                "database": db_status,
            },
        }

        if db_status == "healthy":
            stats = await DatabaseSeeder(self._db_manager).get_stats()
            health["details"] = {"products": stats["products"]["total"]}

        return health


@router.get("")
async def health_check(db_manager: DatabaseManager = Depends(get_database_manager)):
    """
    Health check endpoint.

    Returns API and database status with the product count.
    """
    controller = HealthController(db_manager)
    return await controller.get_health()


@router.get("/ready")
async def readiness_check():
    """Readiness probe for container orchestration."""
    return {"ready": True}


@router.get("/live")
async def liveness_check():
    """Liveness probe for container orchestration."""
    return {"alive": True}
