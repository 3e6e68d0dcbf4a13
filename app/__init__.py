# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: create_app(), middleware setup, error handlers
# - config.py: Environment variable loading and settings
# - context.py: Per-application state handed to handlers
# - auth/: Bearer tokens and the current-user dependency
# - validators/: Ordered request validation per endpoint
# - routers/: Route tables and handlers per resource
#
# The app layer is thin - it handles HTTP concerns and delegates
# data access to the core/ package.
# =============================================================================

VERSION = "1.0.0"
