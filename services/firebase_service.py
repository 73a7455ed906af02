import json
import logging

import firebase_admin
from firebase_admin import credentials, db

from core.config import settings

logger = logging.getLogger(__name__)

# Characters the Realtime Database does not allow in a key.
INVALID_KEY_CHARS = set(".$#[]/")


def initialize_firebase() -> bool:
    """
    Initializes the Firebase Admin SDK.
    Returns False when credentials are missing or initialization fails, so the
    caller can fall back to the local store.
    """
    if not settings.firebase_configured:
        logger.info("Firebase credentials not configured.")
        return False

    try:
        firebase_admin.get_app()
        return True
    except ValueError:
        pass

    try:
        # The service account key is expected to be a JSON string in the environment variable.
        service_account_info = json.loads(settings.FIREBASE_SERVICE_ACCOUNT_KEY_JSON)
        cred = credentials.Certificate(service_account_info)
        firebase_admin.initialize_app(cred, {
            'databaseURL': settings.FIREBASE_DATABASE_URL
        })
        logger.info("Firebase initialized successfully.")
        return True
    except Exception as e:
        logger.error("Error initializing Firebase: %s", e)
        return False


class FirebaseStore:
    """Document store backed by the Firebase Realtime Database.

    Each collection lives under its own top-level reference, keyed by the
    push id of the record.
    """

    backend = "firebase"

    def _is_valid_key(self, record_id: str) -> bool:
        return bool(record_id) and not INVALID_KEY_CHARS.intersection(record_id)

    def _with_id(self, record_id: str, data):
        if not data:
            return None
        record = dict(data)
        record['id'] = record_id
        return record

    def create(self, collection: str, data: dict) -> dict:
        new_ref = db.reference(collection).push()
        to_save = {k: v for k, v in data.items() if k != 'id'}
        new_ref.set(to_save)
        return self._with_id(new_ref.key, to_save)

    def get(self, collection: str, record_id: str):
        if not self._is_valid_key(record_id):
            return None
        data = db.reference(f'{collection}/{record_id}').get()
        return self._with_id(record_id, data)

    def list(self, collection: str) -> list:
        data = db.reference(collection).get()
        if not data:
            return []
        return [self._with_id(key, value) for key, value in data.items()]

    def query(self, collection: str, field: str, value) -> list:
        # Requires an ".indexOn" rule for the field in the database rules.
        data = db.reference(collection).order_by_child(field).equal_to(value).get()
        if not data:
            return []
        return [self._with_id(key, item) for key, item in data.items()]

    def update(self, collection: str, record_id: str, fields: dict):
        if not self._is_valid_key(record_id):
            return None
        ref = db.reference(f'{collection}/{record_id}')
        if ref.get() is None:
            return None
        to_update = {k: v for k, v in fields.items() if k != 'id'}
        if to_update:
            ref.update(to_update)
        return self._with_id(record_id, ref.get())

    def delete(self, collection: str, record_id: str) -> bool:
        if not self._is_valid_key(record_id):
            return False
        ref = db.reference(f'{collection}/{record_id}')
        if ref.get() is None:
            return False
        ref.delete()
        return True
