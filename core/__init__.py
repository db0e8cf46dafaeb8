# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the site's business logic:
# - models/: Pydantic schemas for every document type
# - services/: Collection CRUD, singleton documents, video sources, storage
#
# Routers call services; services talk to lib/supabase_client.py.
# =============================================================================
