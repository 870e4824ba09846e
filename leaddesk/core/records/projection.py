"""Read-only listings derived from a record store."""

from typing import Any, Iterable, List, Optional

from leaddesk.core.pagination import build_paginated_response, paginate_items
from leaddesk.core.records.store import Record, RecordStore


class ViewProjection:
    """
    Tabular view of a store's current contents.

    Holds no copy of the records: every call re-reads the store, so a
    listing taken after a commit or delete always matches what is persisted.
    """

    def __init__(self, store: RecordStore):
        self.store = store

    def list(self, store_key: str) -> List[Record]:
        return self.store.load(store_key)

    def query(
        self,
        store_key: str,
        search: Optional[str] = None,
        status: Optional[str] = None,
        page: int = 1,
        page_size: int = 25,
        search_fields: Iterable[str] = (),
    ) -> dict:
        """
        Filter and paginate a store listing.

        Args:
            search: Case-insensitive substring matched against the string
                fields other than id (only search_fields when given)
            status: Exact match on the record's "status" field
            page: Page number (1-indexed)
            page_size: Records per page
        """
        records = self.list(store_key)

        if search:
            fields = tuple(search_fields)
            needle = search.strip().lower()
            records = [r for r in records if _matches(r, needle, fields)]

        if status:
            records = [r for r in records if r.get("status") == status]

        items, total = paginate_items(records, page, page_size)
        return build_paginated_response(items, total, page, page_size)


def _matches(record: Record, needle: str, fields: tuple) -> bool:
    if fields:
        values: Iterable[Any] = (record.get(f) for f in fields)
    else:
        values = (value for key, value in record.items() if key != "id")
    return any(isinstance(value, str) and needle in value.lower() for value in values)
