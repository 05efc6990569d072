"""Console ticket booking for concerts and theatre plays with plain-text storage."""

__version__ = "1.0.0"
__all__ = ["dates", "records", "ticket", "user", "event", "booking", "cli"]