"""
Health check API route
"""

from datetime import datetime, timezone
from fastapi import APIRouter, HTTPException

from users_api.database.connection import get_db_pool

router = APIRouter()

@router.get("")
async def health_check():
    """Health check - reports unhealthy only when the database cannot be reached"""
    db_pool = get_db_pool()
    if db_pool is None:
        raise HTTPException(status_code=503, detail="Health check failed: database pool not initialized")

    try:
        async with db_pool.acquire() as conn:
            await conn.fetchval("SELECT 1")
    except Exception as e:
        raise HTTPException(status_code=503, detail=f"Health check failed: {str(e)}")

    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "database": "connected"
    }
