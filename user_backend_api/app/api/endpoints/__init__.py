"""
Endpoint subpackage.

Each module defines an APIRouter for one area (users, health).  The
routers are aggregated in ``router.py`` at the package level.
"""
