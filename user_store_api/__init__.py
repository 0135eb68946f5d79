"""
Top‑level package for the User Store API.

This file makes ``user_store_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``user_store_api.app.main``.  All functionality lives in submodules
under ``app``; the ``run`` module starts the server.
"""

__all__ = []
