"""Shared SVG output helpers."""
