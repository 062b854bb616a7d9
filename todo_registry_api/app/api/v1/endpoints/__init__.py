"""
Endpoint subpackage for API v1.

Each module in this package defines an APIRouter: ``todos`` for the
resource routes, ``calls`` for raw query/update calls and ``service``
for the interface description and health probe.  The routers are
aggregated in ``router.py`` at the package level.
"""
