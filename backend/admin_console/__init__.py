"""In-memory record engine behind the admin console."""

__version__ = "1.0.0"
