"""Public exceptions namespace; the classes live in ``gaengine.foundation.exceptions``."""

from __future__ import annotations

from .foundation.exceptions import (
    ConfigurationError,
    GAEngineError,
    IncompatibleOperatorsWarning,
    InvalidAlphabetError,
    InvalidOperatorError,
    InvalidPopulationError,
    InvalidProbabilityError,
    MissingConfigError,
)

__all__ = [
    "GAEngineError",
    "ConfigurationError",
    "InvalidPopulationError",
    "InvalidAlphabetError",
    "InvalidProbabilityError",
    "InvalidOperatorError",
    "MissingConfigError",
    "IncompatibleOperatorsWarning",
]
