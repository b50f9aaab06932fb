"""Assistant API Router - liveness ping for the assistant panel."""

from fastapi import APIRouter, status

router = APIRouter(prefix="/api/assistant", tags=["assistant"])


@router.get("", status_code=status.HTTP_200_OK)
async def assistant_ping():
    return {"message": "AI Assistant route is active and working!"}
