"""
Application package initializer.

The service is organised the same way a larger API would be: request
handlers live in ``api/endpoints``, payload schemas in ``schemas``,
the in‑memory record store in ``services`` and cross‑cutting pieces
(settings, logging, locking) in ``core``.
"""

from .main import app  # noqa: F401
