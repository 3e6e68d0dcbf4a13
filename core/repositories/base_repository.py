# =============================================================================
# core/repositories/base_repository.py - Generic Table Repository
# =============================================================================
# Thin CRUD wrapper around one Supabase table. Each method is a single
# round trip; errors are logged and re-raised unchanged.
# =============================================================================

import logging
from typing import Any
from uuid import UUID

from supabase import Client

from lib.utils import normalize_uuid

logger = logging.getLogger(__name__)

# Columns the database owns; never rewritten by update()
IMMUTABLE_COLUMNS = ("id", "created_at")


class BaseRepository:
    """
    Repository bound to a single table.

    Subclasses set `table_name` and add entity-specific lookups.
    """

    table_name: str = ""

    def __init__(self, client: Client):
        self.client = client

    def table(self):
        """Start a query on this repository's table."""
        return self.client.table(self.table_name)

    def insert(self, record: dict[str, Any]) -> dict[str, Any]:
        """
        Insert a new row.

        Args:
            record: Column values (id and created_at are generated)

        Returns:
            The created row
        """
        try:
            response = self.table().insert(record).execute()
        except Exception as e:
            logger.error(f"Failed to insert into {self.table_name}: {e}")
            raise

        if not response.data:
            raise Exception(f"Insert into {self.table_name} returned no data")

        created = response.data[0]
        logger.info(f"Inserted {self.table_name} row: {created.get('id')}")
        return created

    def update(self, record: dict[str, Any]) -> dict[str, Any]:
        """
        Save a full record by its id.

        Args:
            record: Row previously read from this table, with changes applied

        Returns:
            The saved row
        """
        record_id = normalize_uuid(record["id"])
        data = {k: v for k, v in record.items() if k not in IMMUTABLE_COLUMNS}

        try:
            response = self.table().update(data).eq("id", record_id).execute()
        except Exception as e:
            logger.error(f"Failed to update {self.table_name} {record_id}: {e}")
            raise

        logger.info(f"Updated {self.table_name} row: {record_id}")
        return response.data[0] if response.data else record

    def delete(self, record_id: str | UUID) -> list[dict[str, Any]]:
        """
        Delete a row by id.

        Returns:
            The deleted rows (empty when nothing matched)
        """
        record_id = normalize_uuid(record_id)

        try:
            response = self.table().delete().eq("id", record_id).execute()
        except Exception as e:
            logger.error(f"Failed to delete {self.table_name} {record_id}: {e}")
            raise

        logger.info(f"Deleted {self.table_name} row: {record_id}")
        return response.data or []

    def find_by_id(self, record_id: str | UUID) -> dict[str, Any] | None:
        """Fetch a row by id, or None if it doesn't exist."""
        response = (
            self.table()
            .select("*")
            .eq("id", normalize_uuid(record_id))
            .limit(1)
            .execute()
        )
        return response.data[0] if response.data else None
