"""Runtime settings for scatter.

Settings are held in an immutable :class:`Settings` object. The active object
is replaced as a whole by :func:`configure`, never edited field by field, so
a thread reading the settings always sees one consistent set of values.

Typical usage
-------------

>>> from scatter.config import configure, get_settings
>>> configure(chunk_size=1024).chunk_size
1024
>>> get_settings().chunk_size
1024

Every field can also be seeded from the environment when the module is first
imported (see :meth:`Settings.from_env`).
"""

from __future__ import annotations

import os
import threading
from dataclasses import dataclass, fields, replace
from typing import Mapping, Optional

import numpy as np

from .errors import ConfigurationError

_TRUE_VALUES = {"1", "true", "yes", "y", "on"}

ENV_PREFIX = "SCATTER_"


def env_flag(name: str, default: bool = False, environ: Optional[Mapping[str, str]] = None) -> bool:
    environ = os.environ if environ is None else environ
    val = environ.get(name)
    if val is None:
        return default
    return str(val).strip().lower() in _TRUE_VALUES


def _env_float(name, default, environ):
    val = environ.get(name)
    if val is None or not val.strip():
        return default
    try:
        return float(val)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number, got '{val}'.") from exc


def _env_int(name, default, environ):
    val = environ.get(name)
    if val is None or not val.strip():
        return default
    try:
        return int(val)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got '{val}'.") from exc


@dataclass(frozen=True)
class Settings:
    """
    Numerical and runtime settings.

    Parameters
    ----------
    singular_rcond : float or None
        Reciprocal condition number of the interpolation matrix at or below
        which the system is treated as singular. None (the default) uses the
        rank tolerance of ``numpy.linalg.matrix_rank``, n' times float64
        machine epsilon for an n' x n' system.
    warn_rcond : float
        Reciprocal condition number below which an
        :class:`~scatter.errors.IllConditionedWarning` is emitted. Default 1e-12.
    chunk_size : int
        Number of points evaluated per block by batched evaluation. Default 4096.
    progress : bool
        Show a progress bar during batched evaluation. Default False.
    telemetry_dsn : str or None
        Sentry DSN used by :func:`scatter.telemetry.init_telemetry` when no DSN
        is passed explicitly.
    telemetry_disabled : bool
        Hard-disable telemetry regardless of any DSN.
    """

    singular_rcond: Optional[float] = None
    warn_rcond: float = 1e-12
    chunk_size: int = 4096
    progress: bool = False
    telemetry_dsn: Optional[str] = None
    telemetry_disabled: bool = False

    def __post_init__(self):
        if self.singular_rcond is not None and (not np.isfinite(self.singular_rcond)
                                                or not 0.0 <= self.singular_rcond < 1.0):
            raise ConfigurationError("singular_rcond must lie in [0, 1).")
        if not np.isfinite(self.warn_rcond) or not 0.0 <= self.warn_rcond < 1.0:
            raise ConfigurationError("warn_rcond must lie in [0, 1).")
        if isinstance(self.chunk_size, bool) or not isinstance(self.chunk_size, (int, np.integer)) \
                or self.chunk_size < 1:
            raise ConfigurationError("chunk_size must be a positive integer.")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'Settings':
        """
        Build settings from ``SCATTER_*`` environment variables.

        Unset variables keep the dataclass defaults. Recognised variables are
        ``SCATTER_SINGULAR_RCOND``, ``SCATTER_WARN_RCOND``,
        ``SCATTER_CHUNK_SIZE``, ``SCATTER_PROGRESS``, ``SCATTER_TELEMETRY_DSN``
        and ``SCATTER_TELEMETRY_DISABLED``.
        """
        environ = os.environ if environ is None else environ
        defaults = cls()
        dsn = environ.get(ENV_PREFIX + "TELEMETRY_DSN", "").strip() or None
        return cls(
            singular_rcond=_env_float(ENV_PREFIX + "SINGULAR_RCOND", defaults.singular_rcond, environ),
            warn_rcond=_env_float(ENV_PREFIX + "WARN_RCOND", defaults.warn_rcond, environ),
            chunk_size=_env_int(ENV_PREFIX + "CHUNK_SIZE", defaults.chunk_size, environ),
            progress=env_flag(ENV_PREFIX + "PROGRESS", defaults.progress, environ),
            telemetry_dsn=dsn,
            telemetry_disabled=env_flag(ENV_PREFIX + "TELEMETRY_DISABLED", defaults.telemetry_disabled, environ),
        )


_LOCK = threading.Lock()
_SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    """Return the active settings."""
    return _SETTINGS


def configure(settings: Optional[Settings] = None, **overrides) -> Settings:
    """
    Replace the active settings.

    Either pass a complete :class:`Settings` object, or keyword overrides that
    are applied on top of the active settings. Unknown keywords raise
    :class:`~scatter.errors.ConfigurationError`.
    """
    global _SETTINGS
    known = {f.name for f in fields(Settings)}
    unknown = set(overrides) - known
    if unknown:
        raise ConfigurationError(f"Unknown setting(s): {', '.join(sorted(unknown))}.")
    with _LOCK:
        base = _SETTINGS if settings is None else settings
        new = replace(base, **overrides) if overrides else base
        _SETTINGS = new
    return new


def reset_settings() -> Settings:
    """Restore the settings derived from the current environment."""
    return configure(Settings.from_env())
