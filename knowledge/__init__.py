"""Knowledge: versioned document store with an HTTP API."""

__version__ = "0.1.0"
