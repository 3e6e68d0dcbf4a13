# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application.
# =============================================================================

from uuid import UUID


def normalize_uuid(value: str | UUID) -> str:
    """
    Normalize a UUID to string format for table queries.

    Example:
        task_id = normalize_uuid(uuid_obj)  # "550e8400-..."
        task_id = normalize_uuid("550e8400-...")  # "550e8400-..."
    """
    return str(value) if isinstance(value, UUID) else value
