"""
API package containing the HTTP routes.

``router.py`` exposes a top‑level ``router`` which includes the
routers defined in ``endpoints``.
"""
