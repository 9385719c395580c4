"""Webinars application layer."""
