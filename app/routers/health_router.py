from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from starlette import status

from app.database import Database, get_database

router = APIRouter()


@router.get("/health")
async def health_check(database: Database = Depends(get_database)):
    """Liveness probe that also pings the database."""
    if not await database.ping():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "error", "message": "database not responding"},
        )
    return {"status": "ok"}
