"""Centralized exception hierarchy for SmartHome.

All domain and service exceptions inherit from :class:`SmartHomeError` so that
callers can catch a single base class when they need a broad safety net, yet
still match on specific subclasses where narrower handling is appropriate.

Device lifecycle operations (``turn_on``/``turn_off``) and energy queries never
raise. Only parameter writes and construction can fail, and they always fail
before any state is touched.

Hierarchy
---------
::

    SmartHomeError (base)
    ├── ValidationError      (bad input from caller; nothing was mutated)
    ├── NotFoundError        (device id not registered with a service)
    ├── ConflictError        (duplicate device id)
    └── ConfigurationError   (missing / invalid config)
"""

from __future__ import annotations


class SmartHomeError(Exception):
    """Base exception for all SmartHome errors.

    Parameters
    ----------
    message:
        Human-readable description.
    detail:
        Optional machine-readable context dict attached to the error for
        structured logging (field name, rejected value, ...).
    """

    def __init__(self, message: str = "", *, detail: dict | None = None) -> None:
        super().__init__(message)
        self.detail = detail or {}


class ValidationError(SmartHomeError):
    """Caller supplied an invalid parameter. The target object is unchanged."""


class NotFoundError(SmartHomeError):
    """Requested device does not exist."""


class ConflictError(SmartHomeError):
    """Operation conflicts with existing state."""


class ConfigurationError(SmartHomeError):
    """Missing or invalid application configuration."""
