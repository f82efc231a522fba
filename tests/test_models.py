import pytest

from bracketgraph.exceptions import PayloadDecodeError
from bracketgraph.models import (
    Match,
    MatchState,
    Participant,
    Tournament,
    TournamentState,
    TournamentType,
    format_scores,
    parse_scores_csv,
)


@pytest.mark.parametrize(
    "scores_csv, expected",
    [
        ("", (0, 0)),
        (None, (0, 0)),
        ("3-1", (3, 1)),
        ("3-1,2-3", (5, 4)),
        ("1-3, 3-0, 3-2", (7, 5)),
        ("-1-3", (-1, 3)),
    ],
)
def test_parse_scores_csv(scores_csv, expected):
    assert parse_scores_csv(scores_csv) == expected


@pytest.mark.parametrize("scores_csv", ["3", "3-x", "3-1;2-0", "a-b"])
def test_parse_scores_csv_rejects_garbage(scores_csv):
    with pytest.raises(ValueError):
        parse_scores_csv(scores_csv)


def test_format_scores():
    assert format_scores(3, 1) == "3-1"


def test_state_parsing_is_closed():
    assert MatchState.parse("COMPLETE") is MatchState.COMPLETE
    assert TournamentState.parse("awaiting_review") is TournamentState.AWAITING_REVIEW
    with pytest.raises(PayloadDecodeError):
        MatchState.parse("finished")
    with pytest.raises(PayloadDecodeError):
        TournamentState.parse("")


def test_tournament_type_aliases():
    assert TournamentType.from_alias("") is TournamentType.SINGLE_ELIMINATION
    assert TournamentType.from_alias("single") is TournamentType.SINGLE_ELIMINATION
    assert TournamentType.from_alias("double") is TournamentType.DOUBLE_ELIMINATION
    assert TournamentType.from_alias("round robin") is TournamentType.ROUND_ROBIN
    assert TournamentType.from_alias("swiss") is TournamentType.SWISS
    with pytest.raises(PayloadDecodeError):
        TournamentType.from_alias("ladder")


def test_get_url_prefixes_subdomain():
    assert Tournament(id=1, url="cup").get_url() == "cup"
    assert Tournament(id=1, url="cup", subdomain="org").get_url() == "org-cup"


def test_is_completed_states():
    assert Tournament(id=1, state=TournamentState.COMPLETE).is_completed
    assert Tournament(id=1, state=TournamentState.AWAITING_REVIEW).is_completed
    assert not Tournament(id=1, state=TournamentState.UNDERWAY).is_completed


def test_match_from_dict_normalizes_nulls():
    match = Match.from_dict(
        {
            "id": 7,
            "state": "pending",
            "player1_id": None,
            "player2_id": 4,
            "winner_id": None,
            "player1_prereq_match_id": 5,
            "player2_prereq_match_id": None,
            "scores_csv": None,
        }
    )
    assert match.player_one_id == 0
    assert match.player_two_id == 4
    assert match.winner_id == 0
    assert match.prerequisite_ids == [5]
    assert match.player_one_score == 0
    assert match.updated_at is None


def test_match_loser_id():
    match = Match(id=1, state=MatchState.COMPLETE, player_one_id=1, player_two_id=2)
    assert match.loser_id == 0
    match.winner_id = 2
    assert match.loser_id == 1


def test_participant_statistics_reset():
    participant = Participant(id=1, name="P1")
    participant.win()
    participant.lose()
    participant.add_score(4)
    assert participant.matches_decided == 2
    participant.reset_statistics()
    assert (participant.wins, participant.losses, participant.total_score) == (0, 0, 0)


def test_participant_round_trip_keeps_wire_names():
    participant = Participant.from_dict(
        {"id": 3, "display_name": "Carol", "misc": "tag", "seed": 2, "final_rank": 1}
    )
    assert participant.to_dict() == {
        "id": 3,
        "display_name": "Carol",
        "misc": "tag",
        "seed": 2,
        "final_rank": 1,
    }


def test_tournament_from_dict_scalar_fields():
    tournament = Tournament.from_dict(
        {
            "id": 9,
            "url": "cup",
            "state": "awaiting_review",
            "subdomain": None,
            "tournament_type": "swiss",
            "progress_meter": 80,
            "started_at": "2024-05-01T18:00:00",
            "participants": [{"participant": {"id": 1}}],
        }
    )
    assert tournament.state is TournamentState.AWAITING_REVIEW
    assert tournament.tournament_type is TournamentType.SWISS
    assert tournament.subdomain == ""
    assert tournament.progress == 80
    assert tournament.started_at.tzinfo is not None
    # Embedded entities are decoded by the wire layer
    assert tournament.participant_items == []
