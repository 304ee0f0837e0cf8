"""
Top‑level package for the Signup Server.

This file makes ``signup_server`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``signup_server.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
