import dataclasses

import pytest

from bracketgraph.exceptions import NotFoundError
from bracketgraph.graph import (
    find_participant,
    get_match,
    get_open_matches,
    get_participant,
    get_participant_by_name,
    get_participant_by_tag,
    is_completed,
    list_matches,
    open_match_for,
    prerequisite_matches,
    require_match,
    require_participant,
    resolve_relations,
    standings,
)
from bracketgraph.models import MatchState, Participant, TournamentState
from bracketgraph.wire import decode_tournament


@pytest.fixture
def tournament(bracket_payload):
    return resolve_relations(decode_tournament(bracket_payload)).tournament


def test_find_participant_by_each_key(tournament):
    assert find_participant(tournament, 3).name == "Carol"
    assert get_participant(tournament, 4).name == "Dave"
    assert get_participant_by_name(tournament, "Bob").id == 2
    assert get_participant_by_tag(tournament, "alice@example.com").id == 1


def test_duplicate_tag_returns_first_in_wire_order(tournament):
    assert find_participant(tournament, "team-red", by="tag").name == "Bob"


def test_missing_participant(tournament):
    assert find_participant(tournament, "Zed", by="name") is None
    with pytest.raises(NotFoundError):
        require_participant(tournament, 42)


def test_unknown_lookup_key(tournament):
    with pytest.raises(ValueError):
        find_participant(tournament, "x", by="email")


def test_open_matches_are_a_subset_of_all(tournament):
    all_matches = list_matches(tournament, "all")
    open_matches = list_matches(tournament, "open")

    all_ids = {m.id for m in all_matches}
    assert {m.id for m in open_matches} <= all_ids
    assert all(m.state is MatchState.OPEN for m in open_matches)

    by_state = {}
    for match in all_matches:
        by_state.setdefault(match.state, set()).add(match.id)
    assert by_state[MatchState.OPEN] == {m.id for m in open_matches}
    assert set().union(*by_state.values()) == all_ids


def test_list_matches_rejects_unknown_filter(tournament):
    with pytest.raises(ValueError):
        list_matches(tournament, "complete")


def test_get_match_resolves_complete_matches(tournament):
    match = get_match(tournament, 1)
    assert match.player_one.name == "Alice"
    assert match.winner.name == "Alice"

    assert get_match(tournament, 2).player_one is None
    assert get_match(tournament, 99) is None
    with pytest.raises(NotFoundError):
        require_match(tournament, 99)


def test_references_are_re_resolved_on_access(tournament):
    # A match completed after resolution, e.g. swapped in from a later fetch
    updated = dataclasses.replace(
        tournament.matches[1],
        state=MatchState.COMPLETE,
        winner_id=3,
        player_one_score=2,
    )
    changed = dataclasses.replace(
        tournament, matches=[tournament.matches[0], updated, tournament.matches[2]]
    )

    match = get_match(changed, 2)
    assert match.player_one.name == "Carol"
    assert match.winner.name == "Carol"
    # Read access never touches the counters
    assert get_participant(changed, 3).wins == 0
    assert changed.matches[1].player_one is None


def test_open_match_for_participant(tournament):
    carol = get_participant(tournament, 3)
    alice = get_participant(tournament, 1)

    assert open_match_for(tournament, carol).id == 2
    assert open_match_for(tournament, alice) is None
    assert open_match_for(tournament, Participant(id=77)) is None


def test_get_open_matches(tournament):
    assert [m.id for m in get_open_matches(tournament)] == [2]


def test_prerequisite_matches(tournament):
    final = get_match(tournament, 3)
    assert [m.id for m in prerequisite_matches(tournament, final)] == [1, 2]
    assert prerequisite_matches(tournament, get_match(tournament, 1)) == []


@pytest.mark.parametrize(
    "state, expected",
    [
        (TournamentState.PENDING, False),
        (TournamentState.UNDERWAY, False),
        (TournamentState.AWAITING_REVIEW, True),
        (TournamentState.COMPLETE, True),
    ],
)
def test_is_completed(tournament, state, expected):
    assert is_completed(dataclasses.replace(tournament, state=state)) is expected


def test_standings_orders_by_rank_then_wins(tournament):
    assert [p.name for p in standings(tournament)][:1] == ["Alice"]

    ranked = dataclasses.replace(
        tournament,
        participants=[
            dataclasses.replace(p, final_rank=rank)
            for p, rank in zip(tournament.participants, [2, 1, None, 3])
        ],
    )
    assert [p.name for p in standings(ranked)] == ["Bob", "Alice", "Dave", "Carol"]


@pytest.mark.parametrize(
    "changes",
    [
        {"winner_id": 0},
        {"winner_id": 4},
        {"player_two_id": 1, "winner_id": 1},
    ],
)
def test_rejected_results_get_no_references_on_read(tournament, changes):
    broken = dataclasses.replace(tournament.matches[0].without_references(), **changes)
    changed = dataclasses.replace(
        tournament, matches=[broken] + tournament.matches[1:]
    )

    match = get_match(changed, 1)
    assert match.player_one is None
    assert match.player_two is None
    assert match.winner is None
