"""
Lightweight telemetry wrapper for scatter.

This module provides optional integration with Sentry for error reporting from
the host boundary (:mod:`scatter.io`). It is safe when Sentry is not installed
or when no DSN is configured: every function below is then a no-op.

Telemetry is strictly opt-in. Nothing is sent unless :func:`init_telemetry` is
called with a DSN, or ``SCATTER_TELEMETRY_DSN`` is set, and
``SCATTER_TELEMETRY_DISABLED`` is not set.
"""
from __future__ import annotations

from typing import Optional

from .config import get_settings

_ENABLED: bool = False


def _before_send(event, hint):
    """
    Scrub potentially sensitive fields before sending to Sentry.

    Sample coordinates and values never leave the process; only exception
    types, messages and stack traces do.
    """
    event.pop("user", None)
    event.pop("request", None)
    return event


def init_telemetry(dsn: Optional[str] = None, release: Optional[str] = None,
                   environment: str = "library") -> bool:
    """
    Initialize Sentry-based telemetry if a DSN is available.

    Parameters
    ----------
    dsn : str | None
        Sentry DSN. Falls back to ``Settings.telemetry_dsn``; when neither is
        set telemetry stays disabled.
    release : str | None
        Release string, defaults to ``scatter.__version__``.
    environment : str
        Environment label (e.g., "library", "dev", "staging").

    Returns
    -------
    enabled : bool
        Whether telemetry is active after the call.
    """
    global _ENABLED

    if _ENABLED:
        return True

    settings = get_settings()
    if settings.telemetry_disabled:
        return False
    if not dsn:
        dsn = settings.telemetry_dsn
    if not dsn:
        return False

    try:
        import sentry_sdk  # type: ignore[import]
        from sentry_sdk.integrations.logging import LoggingIntegration  # type: ignore[import]
    except ImportError:
        # Sentry SDK not installed (``pip install scatter-rbf[telemetry]``)
        return False

    if release is None:
        from . import __version__ as release

    logging_integration = LoggingIntegration(
        level=None,        # Do not auto-capture all logs
        event_level=None,  # Only explicit captures
    )
    sentry_sdk.init(
        dsn=dsn,
        release=release,
        environment=environment,
        integrations=[logging_integration],
        before_send=_before_send,
        attach_stacktrace=True,
        send_default_pii=False,
    )
    sentry_sdk.set_tag("application", "scatter")
    _ENABLED = True
    return True


def shutdown_telemetry() -> None:
    """Flush pending events and disable telemetry for this process."""
    global _ENABLED
    if not _ENABLED:
        return
    import sentry_sdk  # type: ignore[import]

    sentry_sdk.flush(timeout=2.0)
    _ENABLED = False


def capture_exception(exc: BaseException) -> None:
    """
    Manually capture an exception and send to telemetry backend, if enabled.
    """
    if not _ENABLED:
        return
    import sentry_sdk  # type: ignore[import]

    sentry_sdk.capture_exception(exc)


def capture_message(message: str, level: str = "info", **tags) -> None:
    """
    Manually capture a message if telemetry is enabled.

    Parameters
    ----------
    message : str
        Message text to record.
    level : str
        Sentry level string, e.g., "info", "warning", "error".
    **tags :
        Optional key/value tags to attach to the event.
    """
    if not _ENABLED:
        return
    import sentry_sdk  # type: ignore[import]

    with sentry_sdk.new_scope() as scope:
        for key, value in tags.items():
            scope.set_tag(key, value)
        sentry_sdk.capture_message(message, level=level)


def telemetry_enabled() -> bool:
    """Return True if telemetry/Sentry has been initialized for this process."""
    return _ENABLED
