# External package imports
from fastapi import APIRouter


router = APIRouter(tags=["status"])


@router.get("/")
async def server_status() -> dict:
    """Liveness check; does not touch the database"""
    return {"server_status": "Server Running"}
