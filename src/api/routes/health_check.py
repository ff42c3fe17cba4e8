from datetime import UTC, datetime

from fastapi import APIRouter, Request, status

router = APIRouter(tags=["Health"])


@router.get("/health", status_code=status.HTTP_200_OK)
async def health():
    return {"status": "OK", "timestamp": datetime.now(UTC).isoformat()}


@router.get("/", status_code=status.HTTP_200_OK)
async def root(request: Request):
    return {"message": request.app.title, "version": request.app.version}
