"""Pairwise max regret under positional scoring rules."""

from .models import Alternative, PSRWeights, RankAssignment, Voter, VoterStrictPreference
from .regret import (
    IMPRECISION_TOLERATED,
    ImprecisionError,
    PairwiseMaxRegret,
    PairwiseMaxRegretError,
    SelfComparisonError,
    by_alternatives,
    by_value,
    ranks_from_profile,
    score_from_profile,
    score_from_ranks,
    score_of_preference,
)
