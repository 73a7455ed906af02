import logging

from fastapi import APIRouter, HTTPException

from schemas.packing_schema import PackingItem, PackingItemUpdate
from services import packing_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/packing-items",
    tags=["Packing Items"],
    responses={404: {"description": "Not found"}},
)


@router.put("/{item_id}", response_model=PackingItem)
def update_item(item_id: str, updates: PackingItemUpdate):
    """
    Updates a single checklist item. Fields left out of the body are unchanged.
    """
    try:
        updated_item = packing_service.update_item(item_id, updates.model_dump(exclude_unset=True))
    except Exception as e:
        logger.exception("Failed to update packing item %s", item_id)
        raise HTTPException(status_code=500, detail="Failed to update packing item") from e

    if not updated_item:
        raise HTTPException(status_code=404, detail="Packing list item not found.")
    return updated_item


@router.put("/{item_id}/toggle", response_model=PackingItem)
def toggle_item(item_id: str):
    """
    Toggles the 'packed' status of a single checklist item.
    """
    try:
        updated_item = packing_service.toggle_item(item_id)
    except Exception as e:
        logger.exception("Failed to toggle packing item %s", item_id)
        raise HTTPException(status_code=500, detail="Failed to update packing item") from e

    if not updated_item:
        raise HTTPException(status_code=404, detail="Packing list item not found.")
    return updated_item


@router.delete("/{item_id}")
def delete_item(item_id: str):
    try:
        deleted = packing_service.delete_item(item_id)
    except Exception as e:
        logger.exception("Failed to delete packing item %s", item_id)
        raise HTTPException(status_code=500, detail="Failed to delete packing item") from e

    if not deleted:
        raise HTTPException(status_code=404, detail="Packing list item not found.")
    return {"success": True}
