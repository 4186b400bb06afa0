"""API views, schemas and errors."""
