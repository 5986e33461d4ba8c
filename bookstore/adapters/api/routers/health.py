# bookstore/adapters/api/routers/health.py
from datetime import datetime, timezone
from typing import Dict

from fastapi import APIRouter, status

from bookstore.adapters.api.schemas.common import Envelope

router = APIRouter(tags=["System"])


@router.get("/health", status_code=status.HTTP_200_OK, response_model=Envelope[Dict[str, str]])
def health():
    """
    Liveness probe. Unauthenticated; reports the server's current time.
    """
    return Envelope(message="OK", data={"date": datetime.now(timezone.utc).isoformat()})
