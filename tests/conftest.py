"""Shared test helpers."""

from minimax.models import Alternative, RankAssignment, Voter, VoterStrictPreference


def make_profile(rankings_table: dict[int, list[int]]) -> dict[Voter, VoterStrictPreference]:
    """Build a profile from a compact rankings table.

    Args:
        rankings_table: {voter_id: [alternative_id, ...]} best first

    Returns:
        Dict mapping Voter -> VoterStrictPreference.
    """
    return {
        Voter(v): VoterStrictPreference.given(Voter(v), [Alternative(a) for a in ranking])
        for v, ranking in rankings_table.items()
    }


def make_ranks(ranks_table: dict[int, int]) -> RankAssignment:
    """Build a rank assignment from {voter_id: rank}."""
    return RankAssignment({Voter(v): rank for v, rank in ranks_table.items()})
