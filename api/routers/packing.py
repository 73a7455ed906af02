import logging
from typing import List

from fastapi import APIRouter, HTTPException, status

from schemas.packing_schema import (
    GeneratedItem,
    ItemTemplate,
    PackingItem,
    PackingItemCreate,
    PackingList,
    PackingListCreate,
    PackingListGenerateRequest,
    PackingListReplace,
    PackingProgress,
    TripConditions,
)
from services import packing_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/packing-lists",
    tags=["Packing Lists"],
    responses={404: {"description": "Not found"}},
)


@router.get("/templates", response_model=List[ItemTemplate])
def get_templates():
    """Returns the template table the generator picks items from."""
    return packing_service.list_templates()


@router.post("/preview", response_model=List[GeneratedItem])
def preview_packing_list(conditions: TripConditions):
    """
    Generates the recommended items for the given trip conditions
    without saving anything.
    """
    return packing_service.generate_packing_list(
        conditions.duration,
        conditions.temp_min,
        conditions.temp_max,
        conditions.activities,
    )


@router.post("", response_model=PackingList, status_code=status.HTTP_201_CREATED)
def create_packing_list(request: PackingListCreate):
    """Saves a packing list and its items for an existing trip."""
    try:
        packing_list = packing_service.create_packing_list(
            request.trip_id,
            request.name,
            [item.model_dump() for item in request.items],
        )
    except Exception as e:
        logger.exception("Failed to create packing list")
        raise HTTPException(status_code=500, detail="Failed to create packing list") from e

    if not packing_list:
        raise HTTPException(status_code=404, detail="Trip not found, cannot create packing list.")
    return packing_list


@router.post("/generate", response_model=PackingList, status_code=status.HTTP_201_CREATED)
def generate_packing_list(request: PackingListGenerateRequest):
    """
    Generates a new packing list for a saved trip.
    Existing lists for the trip are kept.
    """
    try:
        packing_list = packing_service.generate_for_trip(request.trip_id, request.name)
    except Exception as e:
        logger.exception("Failed to generate packing list for trip %s", request.trip_id)
        raise HTTPException(status_code=500, detail="Failed to generate packing list") from e

    if not packing_list:
        raise HTTPException(status_code=404, detail="Trip not found, cannot generate packing list.")
    return packing_list


@router.get("/{list_id}", response_model=PackingList)
def get_packing_list(list_id: str):
    try:
        packing_list = packing_service.get_packing_list(list_id)
    except Exception as e:
        logger.exception("Failed to fetch packing list %s", list_id)
        raise HTTPException(status_code=500, detail="Failed to fetch packing list") from e

    if not packing_list:
        raise HTTPException(status_code=404, detail="Packing list not found")
    return packing_list


@router.put("/{list_id}", response_model=PackingList)
def replace_packing_list(list_id: str, request: PackingListReplace):
    """
    Replaces the list name and all of its items.
    """
    try:
        packing_list = packing_service.replace_packing_list(
            list_id,
            request.name,
            [item.model_dump() for item in request.items],
        )
    except Exception as e:
        logger.exception("Failed to update packing list %s", list_id)
        raise HTTPException(status_code=500, detail="Failed to update packing list") from e

    if not packing_list:
        raise HTTPException(status_code=404, detail="Packing list not found")
    return packing_list


@router.delete("/{list_id}")
def delete_packing_list(list_id: str):
    try:
        deleted = packing_service.delete_packing_list(list_id)
    except Exception as e:
        logger.exception("Failed to delete packing list %s", list_id)
        raise HTTPException(status_code=500, detail="Failed to delete packing list") from e

    if not deleted:
        raise HTTPException(status_code=404, detail="Packing list not found")
    return {"success": True}


@router.get("/{list_id}/progress", response_model=PackingProgress)
def get_progress(list_id: str):
    """
    Returns how many items are packed, overall and per category.
    """
    try:
        progress = packing_service.get_progress(list_id)
    except Exception as e:
        logger.exception("Failed to compute progress for packing list %s", list_id)
        raise HTTPException(status_code=500, detail="Failed to fetch packing list") from e

    if progress is None:
        raise HTTPException(status_code=404, detail="Packing list not found")
    return progress


@router.post("/{list_id}/items", response_model=PackingItem, status_code=status.HTTP_201_CREATED)
def add_item(list_id: str, item: PackingItemCreate):
    """Adds a new, unpacked item to a packing list."""
    try:
        new_item = packing_service.add_item(list_id, item.model_dump())
    except Exception as e:
        logger.exception("Failed to add item to packing list %s", list_id)
        raise HTTPException(status_code=500, detail="Failed to create packing item") from e

    if not new_item:
        raise HTTPException(status_code=404, detail="Packing list not found")
    return new_item
