"""Typed client for a headless content-delivery REST API."""

__version__ = "0.1.0"
