"""HX-Trigger sample: an htmx counter demo served by FastAPI."""

__version__ = "0.1.0"

__all__ = ["__version__"]
