import logging
from typing import List

from fastapi import APIRouter, HTTPException, status

from schemas.trip_schema import TripCreate, TripInfo, TripPlan
from services import trip_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/trips",
    tags=["Trips"],
    responses={404: {"description": "Not found"}},
)


@router.get("", response_model=List[TripInfo])
def get_trips():
    """
    Retrieves all trips, newest first, with their packing lists.
    """
    try:
        return trip_service.get_trips()
    except Exception as e:
        logger.exception("Failed to fetch trips")
        raise HTTPException(status_code=500, detail="Failed to fetch trips") from e


@router.post("", response_model=TripInfo, status_code=status.HTTP_201_CREATED)
def create_trip(trip: TripCreate):
    """Creates a new trip."""
    try:
        return trip_service.create_trip(trip.model_dump())
    except Exception as e:
        logger.exception("Failed to create trip")
        raise HTTPException(status_code=500, detail="Failed to create trip") from e


@router.post("/plan", response_model=TripPlan, status_code=status.HTTP_201_CREATED)
def plan_trip(trip: TripCreate):
    """
    Creates a trip and generates its packing list in one step.
    The list is named after the trip and saved right away.
    """
    try:
        return trip_service.plan_trip(trip.model_dump())
    except Exception as e:
        logger.exception("Failed to plan trip")
        raise HTTPException(status_code=500, detail="Failed to plan trip") from e


@router.get("/{trip_id}", response_model=TripInfo)
def get_trip(trip_id: str):
    """
    Retrieves a single trip by its ID, including its packing lists.
    """
    try:
        trip = trip_service.get_trip_by_id(trip_id)
    except Exception as e:
        logger.exception("Failed to fetch trip %s", trip_id)
        raise HTTPException(status_code=500, detail="Failed to fetch trip") from e

    if not trip:
        raise HTTPException(status_code=404, detail="Trip not found")
    return trip


@router.put("/{trip_id}", response_model=TripInfo)
def update_trip(trip_id: str, trip: TripCreate):
    try:
        updated = trip_service.update_trip(trip_id, trip.model_dump())
    except Exception as e:
        logger.exception("Failed to update trip %s", trip_id)
        raise HTTPException(status_code=500, detail="Failed to update trip") from e

    if not updated:
        raise HTTPException(status_code=404, detail="Trip not found")
    return updated


@router.delete("/{trip_id}")
def delete_trip(trip_id: str):
    """
    Deletes a trip along with its packing lists.
    """
    try:
        deleted = trip_service.delete_trip(trip_id)
    except Exception as e:
        logger.exception("Failed to delete trip %s", trip_id)
        raise HTTPException(status_code=500, detail="Failed to delete trip") from e

    if not deleted:
        raise HTTPException(status_code=404, detail="Trip not found")
    return {"success": True}
