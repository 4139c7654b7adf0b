"""
Endpoint subpackage for API v1.

``resources`` builds the CRUD routers shared by all entities;
``health`` exposes a liveness check.  Routers are assembled in
``router.py`` at the package level.
"""
