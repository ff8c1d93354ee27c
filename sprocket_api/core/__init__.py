"""
Core application utilities for settings, logging, security and FastAPI dependencies.

This package provides:
- Application-level settings (separate from DB settings)
- Structured logging with request correlation ids
- Token helpers for the club admin account
- Dependency helpers (DB session, team service, write guard)
"""
