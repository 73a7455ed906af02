import logging
import threading

from core.config import settings
from services.firebase_service import FirebaseStore, initialize_firebase
from services.local_store import LocalStore

logger = logging.getLogger(__name__)

TRIPS = "trips"
PACKING_LISTS = "packing_lists"
PACKING_ITEMS = "packing_items"

_store = None
_store_lock = threading.Lock()


def get_store():
    """
    Returns the active data store, choosing it on first use.
    Firebase is preferred; the local JSON store is the fallback.
    """
    global _store
    if _store is not None:
        return _store
    with _store_lock:
        if _store is None:
            if initialize_firebase():
                _store = FirebaseStore()
            else:
                logger.warning("Using local store at %s", settings.LOCAL_STORE_PATH)
                _store = LocalStore(settings.LOCAL_STORE_PATH)
    return _store


def set_store(store) -> None:
    global _store
    _store = store
