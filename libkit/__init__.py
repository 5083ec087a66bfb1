"""String, memory, linked-list and number helpers with a printf-style formatter."""

__version__ = "1.0.0"