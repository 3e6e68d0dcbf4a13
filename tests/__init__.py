# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the ChoreBank API:
# - test_validation.py: Ordered validation chains
# - test_security.py: Password policy, hashing and access tokens
# - test_repositories.py: Table repositories against an in-memory fake
# - test_*_api.py: Endpoint tests through FastAPI's TestClient
# - test_app.py: Error envelopes, docs, health and configuration
#
# Run tests with: pytest
# =============================================================================
