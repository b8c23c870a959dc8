"""Positional scores and the pairwise max regret between two alternatives."""

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any, Self

from minimax.models import (
    Alternative,
    PSRWeights,
    RankAssignment,
    Voter,
    VoterStrictPreference,
)

logger = logging.getLogger(__name__)

# Absolute tolerance between a supplied regret and the one derived from ranks.
# A value obtained as (3 - 2) w1 + (4 - 1) w2 may differ slightly from
# (3 w1 + 4 w2) - (2 w1 + 1 w2).
IMPRECISION_TOLERATED = 1e-8


class PairwiseMaxRegretError(ValueError):
    """Raised when the data given for a pairwise max regret is inconsistent."""
    pass


class ImprecisionError(PairwiseMaxRegretError):
    """Raised when a regret value disagrees with the scores of its ranks."""
    pass


class SelfComparisonError(PairwiseMaxRegretError):
    """Raised when an alternative compared with itself has differing ranks or a non-zero regret."""
    pass


def score_from_ranks(ranks: Mapping[Voter, int], weights: PSRWeights) -> float:
    """Sum, over voters, the weight of the rank each voter gives."""
    return math.fsum(weights.weight_at(rank) for rank in ranks.values())


def score_of_preference(
    alternative: Alternative, preference: VoterStrictPreference, weights: PSRWeights
) -> float:
    """Weight a single voter's ranking awards to an alternative."""
    return weights.weight_at(preference.rank_of(alternative))


def score_from_profile(
    alternative: Alternative,
    profile: Mapping[Voter, VoterStrictPreference],
    weights: PSRWeights,
) -> float:
    """Score of an alternative under a positional scoring rule across a profile.

    Args:
        alternative: The alternative to score
        profile: Dict mapping voter -> that voter's strict preference
        weights: Weight awarded for each rank

    Returns:
        Sum over voters of the weight at the rank they give the alternative.

    Raises:
        ValueError: If some voter does not rank the alternative, or ranks it
            beyond the weight vector
    """
    return math.fsum(
        score_of_preference(alternative, preference, weights) for preference in profile.values()
    )


def ranks_from_profile(
    alternative: Alternative, profile: Mapping[Voter, VoterStrictPreference]
) -> RankAssignment:
    """Get the rank every voter of a profile gives to an alternative."""
    return RankAssignment(
        {voter: preference.rank_of(alternative) for voter, preference in profile.items()}
    )


@dataclass(frozen=True)
class PairwiseMaxRegret:
    """Regret of choosing x instead of y under a given weight vector.

    The regret is score(y) - score(x), with each score summed over voters. The
    rank assignments are copied at construction and every construction path
    is validated: the value must match the ranks within
    IMPRECISION_TOLERATED, and comparing an alternative with itself requires
    identical ranks and a regret of exactly zero.

    Equality and hashing ignore pmr_value, which is determined by the other
    fields up to floating point error.

    Attributes:
        x: The alternative that would be chosen
        y: The alternative it is compared against
        ranks_of_x: Dict mapping voter -> rank of x
        ranks_of_y: Dict mapping voter -> rank of y
        weights: The scoring weights the regret is computed under
        pmr_value: score(y) - score(x)

    Example:
        >>> v1, v2 = Voter(1), Voter(2)
        >>> pmr = PairwiseMaxRegret.given(
        ...     Alternative(1), Alternative(2),
        ...     {v1: 1, v2: 2}, {v1: 2, v2: 1},
        ...     PSRWeights.given([3, 1]),
        ... )
        >>> pmr.pmr_value
        0.0
    """
    x: Alternative
    y: Alternative
    ranks_of_x: RankAssignment
    ranks_of_y: RankAssignment
    weights: PSRWeights
    pmr_value: float = field(compare=False)

    def __post_init__(self):
        for f in fields(self):
            if getattr(self, f.name) is None:
                raise TypeError(f"{f.name} must not be None")

        object.__setattr__(self, "ranks_of_x", RankAssignment.of(self.ranks_of_x))
        object.__setattr__(self, "ranks_of_y", RankAssignment.of(self.ranks_of_y))
        object.__setattr__(self, "pmr_value", float(self.pmr_value))

        expected = (
            score_from_ranks(self.ranks_of_y, self.weights)
            - score_from_ranks(self.ranks_of_x, self.weights)
        )
        if not abs(self.pmr_value - expected) < IMPRECISION_TOLERATED:
            logger.debug("Rejecting regret of %s over %s: %r vs %r", self.y, self.x,
                         self.pmr_value, expected)
            raise ImprecisionError(
                f"Regret {self.pmr_value!r} of choosing {self.x} over {self.y} differs "
                f"from score difference {expected!r} by at least {IMPRECISION_TOLERATED}"
            )

        if self.x == self.y:
            if self.ranks_of_x != self.ranks_of_y:
                logger.debug("Rejecting self comparison of %s with differing ranks", self.x)
                raise SelfComparisonError(
                    f"Ranks of {self.x} compared with itself differ: "
                    f"{self.ranks_of_x!r}, {self.ranks_of_y!r}"
                )
            if self.pmr_value != 0.0:
                logger.debug("Rejecting self comparison of %s with regret %r",
                             self.x, self.pmr_value)
                raise SelfComparisonError(
                    f"Regret of {self.x} compared with itself must be 0, got {self.pmr_value!r}"
                )

    @classmethod
    def given(
        cls,
        x: Alternative,
        y: Alternative,
        ranks_of_x: Mapping[Voter, int],
        ranks_of_y: Mapping[Voter, int],
        weights: PSRWeights,
    ) -> Self:
        """Build the regret of x over y, computing its value from the ranks.

        Raises:
            SelfComparisonError: If x equals y but the ranks differ
            TypeError: If an argument is None
        """
        arguments = {"ranks_of_x": ranks_of_x, "ranks_of_y": ranks_of_y, "weights": weights}
        for name, argument in arguments.items():
            if argument is None:
                raise TypeError(f"{name} must not be None")
        value = score_from_ranks(ranks_of_y, weights) - score_from_ranks(ranks_of_x, weights)
        pmr = cls(x, y, ranks_of_x, ranks_of_y, weights, value)
        logger.debug("Computed %s", pmr)
        return pmr

    @classmethod
    def given_value(
        cls,
        x: Alternative,
        y: Alternative,
        ranks_of_x: Mapping[Voter, int],
        ranks_of_y: Mapping[Voter, int],
        weights: PSRWeights,
        pmr_value: float,
    ) -> Self:
        """Build the regret of x over y from a value computed elsewhere.

        The value may have been accumulated in a different order than the
        score difference of the ranks, and is accepted when within
        IMPRECISION_TOLERATED of it.

        Raises:
            ImprecisionError: If the value disagrees with the ranks
            SelfComparisonError: If x equals y but the ranks differ or the value is not 0
            TypeError: If an argument is None
        """
        return cls(x, y, ranks_of_x, ranks_of_y, weights, pmr_value)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "x": self.x.id,
            "y": self.y.id,
            "ranks_of_x": {voter.id: rank for voter, rank in self.ranks_of_x.items()},
            "ranks_of_y": {voter.id: rank for voter, rank in self.ranks_of_y.items()},
            "weights": list(self.weights.weights),
            "pmr_value": self.pmr_value,
        }

    def __str__(self) -> str:
        return (
            f"PairwiseMaxRegret(x={self.x}, y={self.y}, ranks x={self.ranks_of_x!r}, "
            f"ranks y={self.ranks_of_y!r}, weights={self.weights}, value={self.pmr_value})"
        )


def by_value(pmr: PairwiseMaxRegret) -> float:
    """Sort key ordering regrets by ascending value."""
    return pmr.pmr_value


def by_alternatives(pmr: PairwiseMaxRegret) -> tuple[Alternative, Alternative]:
    """Sort key ordering regrets by x, then y, ignoring values and ranks."""
    return (pmr.x, pmr.y)
