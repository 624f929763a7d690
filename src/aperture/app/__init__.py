"""Windowing-side adapters and the demo viewer."""
