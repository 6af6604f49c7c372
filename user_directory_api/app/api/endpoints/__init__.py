"""
Endpoint subpackage.

Each module in this package defines an APIRouter for a specific
area of the API.  The routers are aggregated in ``api/router.py``
and then included in the main application.
"""
