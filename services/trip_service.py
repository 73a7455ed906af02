import datetime
import logging
from typing import List, Optional

from services import packing_service
from services.store import TRIPS, get_store

logger = logging.getLogger(__name__)

TRIP_FIELDS = ("name", "destination", "duration", "temp_min", "temp_max", "activities")


def _trip_record(trip_data: dict) -> dict:
    record = {field: trip_data.get(field) for field in TRIP_FIELDS}
    record["activities"] = list(record["activities"] or [])
    return record


def _with_packing_lists(trip: dict) -> dict:
    # Firebase drops empty lists, so activities may be missing on read.
    trip["activities"] = trip.get("activities") or []
    trip["packing_lists"] = packing_service.get_packing_lists_for_trip(trip["id"])
    return trip


def create_trip(trip_data: dict) -> dict:
    """Saves a new trip."""
    record = _trip_record(trip_data)
    record["created_at"] = datetime.datetime.now(datetime.timezone.utc).isoformat()

    trip = get_store().create(TRIPS, record)
    logger.info("Created trip %s (%s)", trip["id"], trip["name"])
    trip["packing_lists"] = []
    return trip


def get_trips() -> List[dict]:
    """Retrieves all trips, newest first, with their packing lists."""
    trips = get_store().list(TRIPS)
    trips.sort(key=lambda trip: trip.get("created_at", ""), reverse=True)
    return [_with_packing_lists(trip) for trip in trips]


def get_trip_by_id(trip_id: str) -> Optional[dict]:
    trip = get_store().get(TRIPS, trip_id)
    if trip is None:
        return None
    return _with_packing_lists(trip)


def update_trip(trip_id: str, trip_data: dict) -> Optional[dict]:
    """Replaces the editable fields of a trip."""
    trip = get_store().update(TRIPS, trip_id, _trip_record(trip_data))
    if trip is None:
        return None
    return _with_packing_lists(trip)


def delete_trip(trip_id: str) -> bool:
    """Deletes a trip together with its packing lists and their items."""
    store = get_store()
    if store.get(TRIPS, trip_id) is None:
        return False

    removed = packing_service.delete_packing_lists_for_trip(trip_id)
    store.delete(TRIPS, trip_id)
    logger.info("Deleted trip %s and %d packing list(s)", trip_id, removed)
    return True


def plan_trip(trip_data: dict) -> dict:
    """
    Creates a trip and immediately generates and saves its packing list.
    """
    trip = create_trip(trip_data)
    packing_list = packing_service.generate_for_trip(trip["id"])
    trip["packing_lists"] = [packing_list]
    return {"trip": trip, "packing_list": packing_list}
