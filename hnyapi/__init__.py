"""Client for the Honeycomb REST API: configuration, transport and typed resources."""

__version__ = "0.1.0"

__all__ = ["__version__"]