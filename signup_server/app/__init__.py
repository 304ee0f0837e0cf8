"""
Application package.

Route handlers live in ``api/endpoints`` and are aggregated by
``api/router.py``; configuration and logging live in ``core``.  The
ASGI app is ``signup_server.app.main:app``.  It is not re-exported
here so that importing ``core`` alone does not build it.
"""
