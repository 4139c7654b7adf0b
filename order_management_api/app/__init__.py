"""
Application package initializer.

The project is organised into small layers: ``core`` (configuration,
logging, database, security, errors), ``schemas`` (pydantic models per
entity), ``services`` (the generic record lifecycle) and ``api``
(versioned FastAPI routers).
"""

from .main import app  # noqa: F401
