# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - supabase_client.py: Supabase client factory
# - security.py: Password strength policy and bcrypt hashing
# - utils.py: Shared utilities (UUID normalization)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.security import build_password_context, hash_password, is_strong_password, verify_password
from lib.supabase_client import SupabaseClient, SupabaseClientError
from lib.utils import normalize_uuid

__all__ = [
    # Supabase
    "SupabaseClient",
    "SupabaseClientError",
    # Security
    "build_password_context",
    "hash_password",
    "is_strong_password",
    "verify_password",
    # Utils
    "normalize_uuid",
]
