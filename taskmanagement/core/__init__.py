"""Core modules for the Task Management service."""
