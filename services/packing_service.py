import copy
import datetime
import logging
import math
from fractions import Fraction
from typing import Dict, Iterable, List, Optional

from services.store import PACKING_ITEMS, PACKING_LISTS, TRIPS, get_store

logger = logging.getLogger(__name__)

# --- Predefined Packing Items ---
# Rows without activities are common items; a temp_range limits them to trips
# whose temperature range overlaps it. Activity gear ignores temperature.
ITEM_TEMPLATES = [
    # Common items
    {"name": "Underwear", "category": "clothes", "base_quantity": 3, "activities": [], "priority": "high"},
    {"name": "Socks", "category": "clothes", "base_quantity": 3, "activities": [], "priority": "high"},
    {"name": "Phone charger", "category": "devices", "base_quantity": 1, "activities": [], "priority": "high"},
    {"name": "Toothbrush", "category": "hygiene", "base_quantity": 1, "activities": [], "priority": "high"},
    {"name": "Toothpaste", "category": "hygiene", "base_quantity": 1, "activities": [], "priority": "high"},
    {"name": "Shampoo", "category": "hygiene", "base_quantity": 1, "activities": [], "priority": "medium"},

    # Weather-based clothing
    {"name": "T-shirts", "category": "clothes", "base_quantity": 2, "activities": [], "temp_range": {"min": 15, "max": 40}, "priority": "high"},
    {"name": "Shorts", "category": "clothes", "base_quantity": 2, "activities": [], "temp_range": {"min": 20, "max": 40}, "priority": "high"},
    {"name": "Long pants", "category": "clothes", "base_quantity": 1, "activities": [], "temp_range": {"min": -10, "max": 25}, "priority": "high"},
    {"name": "Sweater", "category": "clothes", "base_quantity": 1, "activities": [], "temp_range": {"min": -10, "max": 15}, "priority": "high"},
    {"name": "Winter jacket", "category": "clothes", "base_quantity": 1, "activities": [], "temp_range": {"min": -10, "max": 5}, "priority": "high"},
    {"name": "Rain jacket", "category": "clothes", "base_quantity": 1, "activities": [], "temp_range": {"min": 0, "max": 25}, "priority": "medium"},

    # Camping gear
    {"name": "Tent", "category": "camping", "base_quantity": 1, "activities": ["camping"], "priority": "high"},
    {"name": "Sleeping bag", "category": "camping", "base_quantity": 1, "activities": ["camping"], "priority": "high"},
    {"name": "Sleeping pad", "category": "camping", "base_quantity": 1, "activities": ["camping"], "priority": "high"},
    {"name": "Camping stove", "category": "camping", "base_quantity": 1, "activities": ["camping"], "priority": "high"},
    {"name": "Cookware set", "category": "camping", "base_quantity": 1, "activities": ["camping"], "priority": "medium"},
    {"name": "Headlamp", "category": "camping", "base_quantity": 1, "activities": ["camping"], "priority": "high"},
    {"name": "Lantern", "category": "camping", "base_quantity": 1, "activities": ["camping"], "priority": "medium"},

    # Cycling gear
    {"name": "Helmet", "category": "cycling", "base_quantity": 1, "activities": ["cycling"], "priority": "high"},
    {"name": "Cycling shorts", "category": "cycling", "base_quantity": 2, "activities": ["cycling"], "priority": "high"},
    {"name": "Cycling gloves", "category": "cycling", "base_quantity": 1, "activities": ["cycling"], "priority": "medium"},
    {"name": "Bike repair kit", "category": "cycling", "base_quantity": 1, "activities": ["cycling"], "priority": "high"},
    {"name": "Bike pump", "category": "cycling", "base_quantity": 1, "activities": ["cycling"], "priority": "medium"},

    # Hiking gear
    {"name": "Hiking boots", "category": "hiking", "base_quantity": 1, "activities": ["hiking"], "priority": "high"},
    {"name": "Backpack", "category": "hiking", "base_quantity": 1, "activities": ["hiking"], "priority": "high"},
    {"name": "Water bottle", "category": "hiking", "base_quantity": 2, "activities": ["hiking"], "priority": "high"},
    {"name": "Trail map", "category": "hiking", "base_quantity": 1, "activities": ["hiking"], "priority": "medium"},
    {"name": "First aid kit", "category": "hiking", "base_quantity": 1, "activities": ["hiking"], "priority": "high"},
    {"name": "Hiking poles", "category": "hiking", "base_quantity": 2, "activities": ["hiking"], "priority": "medium"},
]

DAYS_PER_WEEK = 7


def _now() -> str:
    return datetime.datetime.now(datetime.timezone.utc).isoformat()


def _is_relevant(template: dict, temp_min: int, temp_max: int, activities: Iterable[str]) -> bool:
    if not template["activities"]:
        temp_range = template.get("temp_range")
        if temp_range:
            return temp_max >= temp_range["min"] and temp_min <= temp_range["max"]
        return True
    return any(activity in activities for activity in template["activities"])


def scale_quantity(base_quantity: int, duration: int) -> int:
    """Scales a per-week base quantity to the trip length, never below 1."""
    return max(1, math.ceil(Fraction(base_quantity * duration, DAYS_PER_WEEK)))


def generate_packing_list(duration: int, temp_min: int, temp_max: int, activities: Iterable[str]) -> List[dict]:
    """
    Builds the recommended items for a trip from the template table.
    The result is deterministic and follows the table order.
    """
    activities = set(activities)
    relevant = [t for t in ITEM_TEMPLATES if _is_relevant(t, temp_min, temp_max, activities)]

    return [
        {
            "id": f"item-{index}",
            "name": template["name"],
            "category": template["category"],
            "quantity": scale_quantity(template["base_quantity"], duration),
            "packed": False,
            "priority": template["priority"],
        }
        for index, template in enumerate(relevant)
    ]


def list_templates() -> List[dict]:
    return copy.deepcopy(ITEM_TEMPLATES)


def _percent(packed: int, total: int) -> int:
    # Half rounds up: 1 of 8 packed is 13%.
    return (200 * packed + total) // (2 * total) if total else 0


def summarize_progress(items: Iterable[dict]) -> dict:
    """Counts packed items overall and per category."""
    packed = total = 0
    by_category: Dict[str, dict] = {}
    for item in items:
        counts = by_category.setdefault(item["category"], {"packed": 0, "total": 0})
        counts["total"] += 1
        total += 1
        if item.get("packed"):
            counts["packed"] += 1
            packed += 1

    for counts in by_category.values():
        counts["percent"] = _percent(counts["packed"], counts["total"])

    return {"packed": packed, "total": total, "percent": _percent(packed, total), "by_category": by_category}


# --- Persistence ---

def _item_record(list_id: str, item: dict) -> dict:
    return {
        "packing_list_id": list_id,
        "name": item["name"],
        "category": item.get("category", "others"),
        "quantity": item.get("quantity", 1),
        "packed": item.get("packed", False),
        "priority": item.get("priority", "medium"),
        "notes": item.get("notes"),
    }


def _get_items(list_id: str) -> List[dict]:
    return get_store().query(PACKING_ITEMS, "packing_list_id", list_id)


def _create_items(list_id: str, items: Iterable[dict]) -> List[dict]:
    store = get_store()
    return [store.create(PACKING_ITEMS, _item_record(list_id, item)) for item in items]


def _delete_items(list_id: str) -> None:
    store = get_store()
    for item in _get_items(list_id):
        store.delete(PACKING_ITEMS, item["id"])


def _touch_list(list_id: str) -> None:
    get_store().update(PACKING_LISTS, list_id, {"updated_at": _now()})


def create_packing_list(trip_id: str, name: str, items: Iterable[dict]) -> Optional[dict]:
    """
    Saves a packing list and its items for a trip.
    Returns None when the trip does not exist.
    """
    store = get_store()
    if store.get(TRIPS, trip_id) is None:
        return None

    now = _now()
    packing_list = store.create(PACKING_LISTS, {
        "trip_id": trip_id,
        "name": name,
        "created_at": now,
        "updated_at": now,
    })
    packing_list["items"] = _create_items(packing_list["id"], items)
    logger.info("Created packing list %s with %d items for trip %s",
                packing_list["id"], len(packing_list["items"]), trip_id)
    return packing_list


def generate_for_trip(trip_id: str, name: Optional[str] = None) -> Optional[dict]:
    """
    Generates a packing list from a saved trip and stores it.
    Returns None when the trip does not exist.
    """
    trip = get_store().get(TRIPS, trip_id)
    if trip is None:
        return None

    items = generate_packing_list(
        trip["duration"],
        trip["temp_min"],
        trip["temp_max"],
        trip.get("activities") or [],
    )
    return create_packing_list(trip_id, name or f"{trip['name']} - Packing List", items)


def get_packing_list(list_id: str) -> Optional[dict]:
    packing_list = get_store().get(PACKING_LISTS, list_id)
    if packing_list is None:
        return None
    packing_list["items"] = _get_items(list_id)
    return packing_list


def get_packing_lists_for_trip(trip_id: str) -> List[dict]:
    lists = get_store().query(PACKING_LISTS, "trip_id", trip_id)
    for packing_list in lists:
        packing_list["items"] = _get_items(packing_list["id"])
    return lists


def replace_packing_list(list_id: str, name: str, items: Iterable[dict]) -> Optional[dict]:
    """
    Replaces the name and all items of a list.
    Existing items are deleted and recreated from the payload.
    """
    store = get_store()
    if store.get(PACKING_LISTS, list_id) is None:
        return None

    _delete_items(list_id)
    packing_list = store.update(PACKING_LISTS, list_id, {"name": name, "updated_at": _now()})
    if packing_list is None:
        return None
    packing_list["items"] = _create_items(list_id, items)
    return packing_list


def delete_packing_list(list_id: str) -> bool:
    store = get_store()
    if store.get(PACKING_LISTS, list_id) is None:
        return False
    _delete_items(list_id)
    store.delete(PACKING_LISTS, list_id)
    logger.info("Deleted packing list %s", list_id)
    return True


def delete_packing_lists_for_trip(trip_id: str) -> int:
    lists = get_store().query(PACKING_LISTS, "trip_id", trip_id)
    for packing_list in lists:
        delete_packing_list(packing_list["id"])
    return len(lists)


def add_item(list_id: str, item: dict) -> Optional[dict]:
    """Adds an unpacked item to a list. Returns None when the list does not exist."""
    if get_store().get(PACKING_LISTS, list_id) is None:
        return None

    new_item = get_store().create(PACKING_ITEMS, _item_record(list_id, {**item, "packed": False}))
    _touch_list(list_id)
    return new_item


def update_item(item_id: str, fields: dict) -> Optional[dict]:
    """Applies a partial update to an item. Only the given fields change."""
    allowed = {k: v for k, v in fields.items()
               if k in ("name", "category", "quantity", "packed", "priority", "notes")}
    updated = get_store().update(PACKING_ITEMS, item_id, allowed)
    if updated is None:
        return None
    _touch_list(updated["packing_list_id"])
    return updated


def toggle_item(item_id: str) -> Optional[dict]:
    """
    Toggles the 'packed' status of a specific packing list item.
    """
    item = get_store().get(PACKING_ITEMS, item_id)
    if item is None:
        return None
    return update_item(item_id, {"packed": not item.get("packed", False)})


def delete_item(item_id: str) -> bool:
    store = get_store()
    item = store.get(PACKING_ITEMS, item_id)
    if item is None:
        return False
    store.delete(PACKING_ITEMS, item_id)
    _touch_list(item["packing_list_id"])
    return True


def get_progress(list_id: str) -> Optional[dict]:
    packing_list = get_packing_list(list_id)
    if packing_list is None:
        return None
    return summarize_progress(packing_list["items"])
