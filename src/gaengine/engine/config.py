"""Genetic algorithm configuration."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, Tuple

from gaengine.foundation.exceptions import (
    ConfigurationError,
    InvalidAlphabetError,
    InvalidProbabilityError,
    MissingConfigError,
)
from gaengine.operators.registry import DEFAULT_CROSSOVER, DEFAULT_MUTATION


class _SerializableConfig:
    """Adds to_dict and to_json to config dataclasses."""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), sort_keys=True, default=str)


def _require_fields(cfg: Dict[str, Any], fields: Tuple[str, ...], name: str) -> None:
    missing = [field for field in fields if field not in cfg]
    if missing:
        raise MissingConfigError(missing[0], config_class=f"{name}Config")


def validate_alphabet(alphabet: Iterable[Any]) -> tuple[Any, ...]:
    symbols = tuple(alphabet)
    if not symbols:
        raise InvalidAlphabetError("alphabet must contain at least one symbol.")
    seen: list[Any] = []
    for symbol in symbols:
        if symbol in seen:
            raise InvalidAlphabetError(f"alphabet contains duplicate symbol {symbol!r}.")
        seen.append(symbol)
    return symbols


def validate_probability(name: str, value: Any) -> float:
    try:
        prob = float(value)
    except (TypeError, ValueError):
        raise InvalidProbabilityError(name, value) from None
    if not 0.0 <= prob <= 1.0:
        raise InvalidProbabilityError(name, value)
    return prob


def validate_length(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigurationError(
            f"individual_length must be a positive integer, got {value!r}.",
            suggestion="Set individual_length to the number of genes per individual",
            details={"individual_length": value},
        )
    return value


@dataclass(frozen=True)
class GAConfig(_SerializableConfig):
    individual_length: int
    alphabet: tuple[Any, ...]
    mutation_probability: float
    crossover: tuple[str, dict[str, Any]] = (DEFAULT_CROSSOVER, {})
    mutation: tuple[str, dict[str, Any]] = (DEFAULT_MUTATION, {})
    seed: int | None = None

    def __post_init__(self) -> None:
        validate_length(self.individual_length)
        object.__setattr__(self, "alphabet", validate_alphabet(self.alphabet))
        object.__setattr__(
            self,
            "mutation_probability",
            validate_probability("mutation_probability", self.mutation_probability),
        )

    @classmethod
    def default(
        cls,
        individual_length: int,
        alphabet: Iterable[Any],
        mutation_probability: float = 0.1,
    ) -> GAConfig:
        """Cyclic order crossover plus point mutation, unseeded."""
        return (
            cls.builder()
            .individual_length(individual_length)
            .alphabet(alphabet)
            .mutation_probability(mutation_probability)
            .build()
        )

    @classmethod
    def builder(cls) -> _GAConfigBuilder:
        return _GAConfigBuilder()


class _GAConfigBuilder:
    """
    Declarative configuration holder for GA settings.

    Examples:
        cfg = GAConfig.default(8, range(8))
        cfg = (
            GAConfig.builder()
            .individual_length(8)
            .alphabet(range(8))
            .mutation_probability(0.15)
            .crossover("order")
            .mutation("swap")
            .seed(42)
            .build()
        )
    """

    def __init__(self) -> None:
        self._cfg: dict[str, Any] = {}

    def individual_length(self, value: int) -> _GAConfigBuilder:
        self._cfg["individual_length"] = value
        return self

    def alphabet(self, symbols: Iterable[Any]) -> _GAConfigBuilder:
        self._cfg["alphabet"] = tuple(symbols)
        return self

    def mutation_probability(self, value: float) -> _GAConfigBuilder:
        self._cfg["mutation_probability"] = value
        return self

    def crossover(self, method: str, **kwargs: Any) -> _GAConfigBuilder:
        self._cfg["crossover"] = (method, kwargs)
        return self

    def mutation(self, method: str, **kwargs: Any) -> _GAConfigBuilder:
        self._cfg["mutation"] = (method, kwargs)
        return self

    def seed(self, value: int | None) -> _GAConfigBuilder:
        self._cfg["seed"] = None if value is None else int(value)
        return self

    def build(self) -> GAConfig:
        _require_fields(
            self._cfg,
            ("individual_length", "alphabet", "mutation_probability"),
            "GA",
        )
        return GAConfig(
            individual_length=self._cfg["individual_length"],
            alphabet=self._cfg["alphabet"],
            mutation_probability=self._cfg["mutation_probability"],
            crossover=self._cfg.get("crossover", (DEFAULT_CROSSOVER, {})),
            mutation=self._cfg.get("mutation", (DEFAULT_MUTATION, {})),
            seed=self._cfg.get("seed"),
        )


__all__ = [
    "GAConfig",
    "validate_alphabet",
    "validate_probability",
    "validate_length",
]
