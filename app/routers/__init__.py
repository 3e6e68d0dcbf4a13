# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by resource:
# - health.py: Health check endpoints
# - users.py: Sign-up, login and token validation
# - tasks.py: Task CRUD
# - members.py: Member CRUD with photo upload
#
# Each module declares a ROUTES table and the router built from it;
# main.py includes the routers.
# =============================================================================

from . import health
from . import members
from . import tasks
from . import users

__all__ = [
    "health",
    "members",
    "tasks",
    "users",
]
