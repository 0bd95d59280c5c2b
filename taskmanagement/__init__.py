"""Task Management - task and user tracking REST service."""

__version__ = "1.0.0"
