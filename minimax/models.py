"""Core data models for voters, alternatives, preferences and scoring weights."""

import math
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Self


@dataclass(frozen=True, order=True)
class Alternative:
    """A candidate option being ranked by voters.

    Alternatives are ordered by id, which gives the natural ordering used when
    sorting pairwise regrets by the pair they describe.
    """
    id: int

    def __str__(self) -> str:
        return f"a{self.id}"


@dataclass(frozen=True, order=True)
class Voter:
    """A participant whose preference is one strict ranking of alternatives."""
    id: int

    def __str__(self) -> str:
        return f"v{self.id}"


class RankAssignment(Mapping[Voter, int]):
    """Immutable mapping of voter -> rank (1 = most preferred) for one alternative.

    Built as a copy of the given mapping, so later changes to the source do not
    show through. Compares equal to any mapping holding the same items, and is
    hashable so it can take part in the identity of a value object.

    Example:
        >>> ranks = RankAssignment({Voter(1): 1, Voter(2): 2})
        >>> ranks == {Voter(1): 1, Voter(2): 2}
        True
    """

    __slots__ = ("_ranks",)

    def __init__(self, ranks: Mapping[Voter, int] | None = None):
        self._ranks: dict[Voter, int] = dict(ranks) if ranks is not None else {}

    @classmethod
    def of(cls, ranks: Mapping[Voter, int]) -> Self:
        """Return `ranks` itself if already a RankAssignment, otherwise a copy."""
        if isinstance(ranks, cls):
            return ranks
        return cls(ranks)

    def __getitem__(self, voter: Voter) -> int:
        return self._ranks[voter]

    def __iter__(self) -> Iterator[Voter]:
        return iter(self._ranks)

    def __len__(self) -> int:
        return len(self._ranks)

    def __hash__(self) -> int:
        return hash(frozenset(self._ranks.items()))

    def __repr__(self) -> str:
        items = ", ".join(f"{voter}: {rank}" for voter, rank in self._ranks.items())
        return f"{{{items}}}"


@dataclass(frozen=True)
class VoterStrictPreference:
    """A voter's strict ranking of alternatives.

    Attributes:
        voter: The voter holding this preference
        alternatives: Alternatives from most to least preferred, without ties
    """
    voter: Voter
    alternatives: tuple[Alternative, ...]

    def __post_init__(self):
        alternatives = tuple(self.alternatives)
        if not alternatives:
            raise ValueError(f"Preference of {self.voter} ranks no alternatives")
        if len(set(alternatives)) != len(alternatives):
            raise ValueError(
                f"Preference of {self.voter} is not strict: {list(map(str, alternatives))}"
            )
        object.__setattr__(self, "alternatives", alternatives)

    @classmethod
    def given(cls, voter: Voter, alternatives: list[Alternative]) -> Self:
        return cls(voter=voter, alternatives=tuple(alternatives))

    def rank_of(self, alternative: Alternative) -> int:
        """Get the rank (1-indexed) this voter gives to an alternative."""
        try:
            return self.alternatives.index(alternative) + 1
        except ValueError:
            raise ValueError(
                f"Alternative {alternative} not found in ranking of {self.voter}"
            ) from None


@dataclass(frozen=True)
class PSRWeights:
    """Weight vector of a positional scoring rule.

    The weight at index 0 is awarded for rank 1, index 1 for rank 2, and so
    on. Weights never increase with rank.

    Example:
        >>> borda = PSRWeights.given([2, 1, 0])
        >>> borda.weight_at(1)
        2.0
    """
    weights: tuple[float, ...]

    def __post_init__(self):
        weights = tuple(float(w) for w in self.weights)
        if not weights:
            raise ValueError("A scoring rule needs at least one weight")
        if not all(math.isfinite(w) for w in weights):
            raise ValueError(f"Weights must be finite: {list(weights)}")
        for rank, (current, following) in enumerate(zip(weights, weights[1:]), start=1):
            if following > current:
                raise ValueError(
                    f"Weights must not increase with rank: rank {rank + 1} has "
                    f"{following}, more than {current} at rank {rank}"
                )
        object.__setattr__(self, "weights", weights)

    @classmethod
    def given(cls, weights: list[float]) -> Self:
        return cls(weights=tuple(weights))

    @property
    def size(self) -> int:
        return len(self.weights)

    def weight_at(self, rank: int) -> float:
        """Get the weight awarded for a 1-indexed rank."""
        if not isinstance(rank, int) or isinstance(rank, bool):
            raise ValueError(f"Rank {rank!r} is not an integer")
        if not 1 <= rank <= self.size:
            raise ValueError(f"Rank {rank} is outside 1..{self.size}")
        return self.weights[rank - 1]

    def to_dict(self) -> dict[str, Any]:
        return {"weights": list(self.weights)}

    def __str__(self) -> str:
        return f"PSRWeights({list(self.weights)})"
