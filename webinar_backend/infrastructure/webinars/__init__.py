"""Webinars infrastructure: persistence adapters."""
