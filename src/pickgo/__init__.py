"""pickgo: scaffold Go projects from cached architecture templates."""

__version__ = "0.1.0"

__all__ = ["__version__"]
