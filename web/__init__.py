"""HTTP layer - FastAPI application and API views."""
