"""
Errors raised by gaengine.

Every error carries a short ``message``, an optional ``suggestion`` telling
the caller how to fix the input, and a ``details`` dict with the offending
values. Input problems derive from ``ConfigurationError``, which is also a
``ValueError`` so generic callers can keep catching that.

Example:
    try:
        ga.run_for_iterations(population, fitness_fn, 100)
    except ConfigurationError as exc:
        log.error("bad GA input: %s (details=%s)", exc.message, exc.details)
"""

from __future__ import annotations

from typing import Any


class GAEngineError(Exception):
    """
    Root of the gaengine error hierarchy.

    Attributes:
        message: What went wrong.
        suggestion: How to fix it, if known.
        details: Values involved in the failure.
    """

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.suggestion = suggestion
        self.details = dict(details) if details else {}
        super().__init__(self._render())

    def _render(self) -> str:
        if not self.suggestion:
            return self.message
        return f"{self.message}\n\nSuggestion: {self.suggestion}"


class ConfigurationError(GAEngineError, ValueError):
    """Invalid engine settings or run inputs."""


class InvalidPopulationError(ConfigurationError):
    """Empty initial population, or an individual whose length is not ``individual_length``."""

    def __init__(self, message: str, individual_length: int | None = None, index: int | None = None) -> None:
        super().__init__(
            message,
            "Start from a non-empty population whose individuals all have individual_length genes",
            {"individual_length": individual_length, "index": index},
        )


class InvalidAlphabetError(ConfigurationError):
    def __init__(self, message: str) -> None:
        super().__init__(message, "Use a non-empty alphabet of distinct symbols")


class InvalidProbabilityError(ConfigurationError):
    def __init__(self, name: str, value: Any) -> None:
        super().__init__(
            f"{name} must lie in [0, 1], got {value!r}.",
            f"Set {name} to a value between 0.0 and 1.0",
            {"name": name, "value": value},
        )


class InvalidOperatorError(ConfigurationError):
    """Operator name not present in the crossover or mutation registry."""

    def __init__(self, operator_type: str, operator_name: str, available: list[str] | None = None) -> None:
        hint = None
        if available:
            hint = f"Known {operator_type} operators are: {', '.join(available)}"
        super().__init__(
            f"No {operator_type} operator named '{operator_name}'.",
            hint,
            {"operator_type": operator_type, "operator_name": operator_name},
        )


class MissingConfigError(ConfigurationError):
    def __init__(self, field: str, config_class: str | None = None) -> None:
        hint = f"Set '{field}' on the builder"
        if config_class:
            hint = f"{hint}, or start from {config_class}.default()"
        super().__init__(f"Required setting '{field}' was not provided.", hint, {"field": field})


class IncompatibleOperatorsWarning(UserWarning):
    """A permutation-only crossover is paired with a mutation that can break permutations."""


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
