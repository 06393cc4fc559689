"""FastAPI application package for TaskForge."""
