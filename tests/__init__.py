# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for The Ben API:
# - test_video_reference.py: Video source normalization rules
# - test_singleton_service.py: Get-or-create / merge semantics of singletons
# - test_document_service.py: Collection CRUD and error mapping
# - test_models.py: Pydantic request/response model validation
# - test_api.py: HTTP contract (status codes, bodies, uploads)
#
# fake_supabase.py provides the in-memory database used by the tests.
#
# Run tests with: pytest
# =============================================================================
