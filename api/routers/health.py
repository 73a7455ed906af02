import logging

from fastapi import APIRouter, HTTPException

from services.store import TRIPS, get_store

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/health",
    tags=["Health"],
)


@router.get("")
def check_health():
    """
    Checks that the data store answers, and reports which backend is in use.
    """
    try:
        store = get_store()
        trip_count = len(store.list(TRIPS))
    except Exception as e:
        logger.exception("Data store connection failed")
        raise HTTPException(status_code=503, detail="Data store connection failed") from e
    return {"status": "ok", "storage": store.backend, "trips": trip_count}
