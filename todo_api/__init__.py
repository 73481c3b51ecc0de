"""Todo API Service: CRUD over to-do items."""

__version__ = "0.1.0"
