"""Health check API endpoints."""

import time
from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from ..config import get_settings
from ..models.response import HealthResponse
from ..service_instance import search_service, word_store

router = APIRouter(prefix="/api/v1", tags=["health"])
settings = get_settings()

# Track application start time
app_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check the health status of the word search service"
)
async def health_check() -> HealthResponse:
    """
    Perform a health check on the service.
    
    The store is degraded when it holds no words, since every search
    then resolves to an empty list.
    """
    try:
        uptime = time.time() - app_start_time
        
        dependencies = {
            "word_store": "healthy" if len(word_store) > 0 else "degraded",
            "search_service": "healthy"
        }
        
        try:
            search_service.resolver.fuzzy_matches("", word_store.all_words())
        except Exception:
            dependencies["search_service"] = "unhealthy"
        
        # Determine overall status
        if all(status == "healthy" for status in dependencies.values()):
            status = "healthy"
        elif any(status == "unhealthy" for status in dependencies.values()):
            status = "unhealthy"
        else:
            status = "degraded"
        
        return HealthResponse(
            status=status,
            version=settings.app_version,
            uptime=uptime,
            dependencies=dependencies
        )
        
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Health check failed: {str(e)}"
        )


@router.get(
    "/health/ready",
    summary="Readiness check",
    description="Check if the service is ready to accept requests"
)
async def readiness_check() -> JSONResponse:
    """Report readiness along with search and store statistics."""
    try:
        stats = search_service.get_stats()
        
        return JSONResponse(
            status_code=200,
            content={
                "status": "ready",
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "store_stats": stats.get("store_stats", {}),
                "search_stats": {
                    key: value for key, value in stats.items() if key != "store_stats"
                }
            }
        )
        
    except Exception as e:
        return JSONResponse(
            status_code=503,
            content={
                "status": "not_ready",
                "error": str(e),
                "timestamp": datetime.now(timezone.utc).isoformat()
            }
        )


@router.get(
    "/health/live",
    summary="Liveness check",
    description="Check if the service is alive and responding"
)
async def liveness_check() -> JSONResponse:
    """Simple liveness probe."""
    return JSONResponse(
        status_code=200,
        content={
            "status": "alive",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "uptime": time.time() - app_start_time
        }
    )
