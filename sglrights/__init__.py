"""HTTP service and SQLite storage for esports events, users and event rights sales."""

__version__ = "0.1.0"