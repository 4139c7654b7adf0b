"""
Top‑level package for the Order Management API.

All functionality lives in submodules under ``app``; import the ASGI
application as ``order_management_api.app.main:app``.
"""

__all__ = []
