# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the data-facing logic:
# - models/: Pydantic schemas for requests and responses
# - repositories/: One repository per Supabase table
# - services/: Photo storage
# - validation.py: Ordered validation chains
#
# Code in this package does not define HTTP routes.
# =============================================================================
