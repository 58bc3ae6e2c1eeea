"""Python client for the OpenRefine command API."""

__version__ = "0.1.0"
