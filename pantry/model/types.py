# pantry/model/types.py
import json
from sqlalchemy.types import TypeDecorator, Text

ITEMS_SCHEMA = "order-items"
ITEMS_SCHEMA_VERSION = 1


class ItemSnapshot(TypeDecorator):
    """Order item snapshot stored as a tagged JSON blob.

    On disk::

        {"schema": "order-items", "version": 1,
         "items": [{"product_id": 1, "name": "...", "unit_price": 299.0, "quantity": 2}, ...]}

    Reads return the ``items`` list exactly as written. Blobs without the
    envelope (a bare JSON list) are returned untouched; old snapshots are
    never migrated.
    """
    impl = Text
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        envelope = {
            "schema": ITEMS_SCHEMA,
            "version": ITEMS_SCHEMA_VERSION,
            "items": list(value),
        }
        return json.dumps(envelope, separators=(",", ":"))

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        data = json.loads(value)
        if isinstance(data, dict) and data.get("schema") == ITEMS_SCHEMA:
            return data.get("items") or []
        return data
