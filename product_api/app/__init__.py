"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules.  Schemas describe the wire format, services own the
in‑memory product store and validation rules, and routers live under
``api/<version>/``.
"""

from .main import app  # noqa: F401
