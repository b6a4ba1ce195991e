"""Directus-backed content pages rendered with FastAPI and Jinja2.

Pages and their sections are fetched from a Directus instance and rendered
three ways: a listing assembled from JSON endpoints, detail pages built once
ahead of time, and detail pages fetched fresh on every request.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
