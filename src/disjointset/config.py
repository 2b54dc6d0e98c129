"""Declarative configuration for disjoint-set construction."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import asdict, dataclass
from typing import Any

from disjointset.disjoint_set import DisjointSet
from disjointset.errors import InvalidConfigurationError
from disjointset.strategies import DEFAULT_STRATEGY, STRATEGY_REGISTRY, create_strategy

__all__ = ["DisjointSetConfig", "create_disjoint_set"]


@dataclass(frozen=True)
class DisjointSetConfig:
    """Configuration for building a :class:`DisjointSet`.

    Attributes
    ----------
    strategy : str
        Key in ``STRATEGY_REGISTRY`` (default: ``"full"``).
    """

    strategy: str = DEFAULT_STRATEGY

    def __post_init__(self) -> None:
        """Validate strategy name."""
        if self.strategy not in STRATEGY_REGISTRY:
            valid = ", ".join(sorted(STRATEGY_REGISTRY))
            raise InvalidConfigurationError(
                f"Unknown strategy: {self.strategy!r}. Valid strategies: {valid}"
            )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


def create_disjoint_set(config: DisjointSetConfig | None = None) -> DisjointSet[Hashable]:
    """Build an empty disjoint set from *config*.

    Parameters
    ----------
    config : DisjointSetConfig | None, optional
        Configuration, by default ``DisjointSetConfig()``.

    Returns
    -------
    DisjointSet[Hashable]
        Empty container using the configured strategy.
    """
    if config is None:
        config = DisjointSetConfig()
    return DisjointSet(create_strategy(config.strategy))
