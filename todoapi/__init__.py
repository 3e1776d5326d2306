"""Todo Items service: CRUD over todo items held in a process-local store."""

__version__ = "0.1.0"
