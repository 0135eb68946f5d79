"""
Endpoint subpackage.

Each module defines an APIRouter for one area of the service.  The
routers are aggregated in ``api/router.py``.
"""
