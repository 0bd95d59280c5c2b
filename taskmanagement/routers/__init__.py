"""API routers for the Task Management service."""
