"""Disjoint-set (union-find) container with union by rank."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Generic, TypeVar

from disjointset.errors import (
    ElementNotFoundError,
    InvalidConfigurationError,
    NullElementError,
)
from disjointset.strategies import FindCompressStrategy, FullCompression

__all__ = ["DisjointSet"]

E = TypeVar("E", bound=Hashable)


class DisjointSet(Generic[E]):
    """Collection of disjoint sets supporting union and find.

    The forest is kept in two dicts keyed by element: the parent of each
    element (a root is its own parent) and the rank of each element (an
    upper bound on tree height, only consulted at roots). Root lookup and
    path compression are delegated to an injected strategy, which is the
    only code allowed to re-point parents outside of :meth:`union`.

    Elements must be registered with :meth:`make_set` before they can be
    found or united; lookups never auto-register.

    Not safe for concurrent mutation: ``find`` writes to the parent
    mapping. Guard the whole instance with a single lock if shared.

    Attributes
    ----------
    find_strategy : FindCompressStrategy
        Strategy used to resolve roots.
    """

    def __init__(
        self,
        find_strategy: FindCompressStrategy | None = None,
        *,
        parent_by_element: dict[E, E] | None = None,
        rank_by_element: dict[E, int] | None = None,
    ) -> None:
        """Initialize an empty (or resumed) disjoint set.

        Parameters
        ----------
        find_strategy : FindCompressStrategy | None, optional
            Root-finding strategy, by default :class:`FullCompression`.
        parent_by_element : dict[E, E] | None, optional
            Existing parent mapping to resume from. Used as-is, not copied.
        rank_by_element : dict[E, int] | None, optional
            Existing rank mapping to resume from. Used as-is, not copied.

        Raises
        ------
        InvalidConfigurationError
            If *find_strategy* is not callable, or only one of the two
            mappings is given.
        """
        if (parent_by_element is None) != (rank_by_element is None):
            missing = "rank_by_element" if rank_by_element is None else "parent_by_element"
            raise InvalidConfigurationError(
                f"{missing} must not be None when resuming from an existing mapping"
            )
        if find_strategy is None:
            find_strategy = FullCompression()
        if not callable(find_strategy):
            raise InvalidConfigurationError(
                f"find_strategy must be callable, got {type(find_strategy).__name__}"
            )

        self.find_strategy = find_strategy
        self._parent: dict[E, E] = {} if parent_by_element is None else parent_by_element
        self._rank: dict[E, int] = {} if rank_by_element is None else rank_by_element

    @classmethod
    def from_state(
        cls,
        parent_by_element: dict[E, E],
        rank_by_element: dict[E, int],
        find_strategy: FindCompressStrategy,
    ) -> DisjointSet[E]:
        """Resume a previously computed forest.

        The caller is responsible for the injected state being a valid
        forest: every parent chain must end at a self-mapped root and
        every root must have a rank. A cycle without a root makes
        ``find`` loop forever.

        Parameters
        ----------
        parent_by_element : dict[E, E]
            Parent mapping.
        rank_by_element : dict[E, int]
            Rank mapping.
        find_strategy : FindCompressStrategy
            Root-finding strategy.

        Returns
        -------
        DisjointSet[E]
            Container operating on the given mappings.

        Raises
        ------
        InvalidConfigurationError
            If any argument is None.
        """
        if parent_by_element is None:
            raise InvalidConfigurationError("parent_by_element must not be None")
        if rank_by_element is None:
            raise InvalidConfigurationError("rank_by_element must not be None")
        if find_strategy is None:
            raise InvalidConfigurationError("find_strategy must not be None")
        return cls(
            find_strategy,
            parent_by_element=parent_by_element,
            rank_by_element=rank_by_element,
        )

    def make_set(self, element: E) -> None:
        """Register *element* as a singleton set.

        No-op if the element is already registered.

        Parameters
        ----------
        element : E
            Element to register.

        Raises
        ------
        NullElementError
            If *element* is None.
        """
        if element is None:
            raise NullElementError("element")
        if element not in self._parent:
            self._parent[element] = element
            self._rank[element] = 0

    def make_sets(self, elements: Iterable[E]) -> None:
        """Register each element of *elements* in order.

        Not transactional: elements before the first invalid one stay
        registered.

        Parameters
        ----------
        elements : Iterable[E]
            Elements to register.

        Raises
        ------
        NullElementError
            If *elements* is None or yields None.
        """
        if elements is None:
            raise NullElementError("elements")
        for element in elements:
            self.make_set(element)

    def find(self, element: E) -> E:
        """Return the representative of the set containing *element*.

        May compress the path from *element* to its root.

        Parameters
        ----------
        element : E
            Registered element.

        Returns
        -------
        E
            Root of the element's set.

        Raises
        ------
        NullElementError
            If *element* is None.
        ElementNotFoundError
            If *element* was never registered.
        """
        if element is None:
            raise NullElementError("element")
        return self.find_strategy(self._parent, element)

    def union(self, first: E, second: E) -> None:
        """Merge the sets containing *first* and *second*.

        The root of higher rank becomes the parent. On a tie the root of
        *second* wins and its rank grows by one.

        Parameters
        ----------
        first : E
            Element of the first set.
        second : E
            Element of the second set.

        Raises
        ------
        NullElementError
            If either element is None.
        ElementNotFoundError
            If either element was never registered. Nothing is mutated.
        """
        if first is None:
            raise NullElementError("first")
        if second is None:
            raise NullElementError("second")
        # Both must be known before find() starts compressing paths
        for element in (first, second):
            if element not in self._parent:
                raise ElementNotFoundError(element)

        first_root = self.find(first)
        second_root = self.find(second)

        if first_root == second_root:
            return

        first_rank = self._rank[first_root]
        second_rank = self._rank[second_root]

        if first_rank > second_rank:
            self._parent[second_root] = first_root
        else:
            self._parent[first_root] = second_root
            if first_rank == second_rank:
                self._rank[second_root] = second_rank + 1

    def is_connected(self, first: E, second: E) -> bool:
        """Check whether two registered elements share a set.

        Parameters
        ----------
        first : E
            First element.
        second : E
            Second element.

        Returns
        -------
        bool
            True if both resolve to the same root.
        """
        return self.find(first) == self.find(second)

    def components(self) -> list[list[E]]:
        """Group all registered elements by set.

        Returns
        -------
        list[list[E]]
            One list per set. Sets are ordered by their first registered
            member, members by registration order.
        """
        components_dict: dict[E, list[E]] = {}

        for element in list(self._parent):
            root = self.find(element)
            if root not in components_dict:
                components_dict[root] = []
            components_dict[root].append(element)

        return list(components_dict.values())

    @property
    def set_count(self) -> int:
        """Number of distinct sets."""
        return sum(1 for element, parent in self._parent.items() if element == parent)

    @property
    def parent_by_element(self) -> Mapping[E, E]:
        """Read-only view of the parent mapping."""
        return MappingProxyType(self._parent)

    @property
    def rank_by_element(self) -> Mapping[E, int]:
        """Read-only view of the rank mapping."""
        return MappingProxyType(self._rank)

    def __contains__(self, element: object) -> bool:
        return element in self._parent

    def __len__(self) -> int:
        return len(self._parent)

    def __iter__(self) -> Iterator[E]:
        return iter(self._parent)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(elements={len(self._parent)}, "
            f"sets={self.set_count}, find_strategy={self.find_strategy!r})"
        )
