import pytest

from bracketgraph.exceptions import (
    PayloadDecodeError,
    RemoteRejectionError,
    UnexpectedShapeError,
)
from bracketgraph.models import MatchState, TournamentState, TournamentType
from bracketgraph.wire import (
    RandomizeAccepted,
    RandomizeRejected,
    decode_match_item,
    decode_randomize_response,
    decode_response,
    decode_tournament,
    decode_tournament_list,
)


def test_decode_tournament_keeps_items_wrapped(bracket_payload):
    tournament = decode_tournament(bracket_payload)

    assert tournament.id == 1000
    assert tournament.state is TournamentState.UNDERWAY
    assert tournament.tournament_type is TournamentType.SINGLE_ELIMINATION
    assert tournament.started_at is not None
    assert tournament.started_at.utcoffset() is not None
    assert [i.participant.name for i in tournament.participant_items] == [
        "Alice",
        "Bob",
        "Carol",
        "Dave",
    ]
    assert [i.match.id for i in tournament.match_items] == [1, 2, 3]
    assert tournament.participants == []
    assert tournament.matches == []


def test_decode_tournament_accepts_bare_object(bracket_payload):
    bare = bracket_payload["tournament"]
    assert decode_tournament(bare).url == "spring_cup"


def test_decode_tournament_rejects_unknown_state(tournament_json):
    with pytest.raises(PayloadDecodeError):
        decode_tournament(tournament_json(state="halfway"))


def test_decode_tournament_rejects_unknown_match_state(
    tournament_json, participant_json, match_json
):
    payload = tournament_json(
        participants=[participant_json(1, "P1"), participant_json(2, "P2")],
        matches=[match_json(10, "done", 1, 2)],
    )
    with pytest.raises(PayloadDecodeError):
        decode_tournament(payload)


def test_decode_tournament_rejects_bad_scores(
    tournament_json, participant_json, match_json
):
    payload = tournament_json(
        participants=[participant_json(1, "P1"), participant_json(2, "P2")],
        matches=[match_json(10, "complete", 1, 2, winner=1, scores="three-one")],
    )
    with pytest.raises(PayloadDecodeError):
        decode_tournament(payload)


def test_decode_tournament_requires_id():
    with pytest.raises(PayloadDecodeError):
        decode_tournament({"tournament": {"url": "no_id"}})


def test_decode_tournament_rejects_non_object():
    with pytest.raises(PayloadDecodeError):
        decode_tournament(["not", "a", "tournament"])


def test_decode_match_item_null_shapes(match_json):
    assert decode_match_item(None) is None
    assert decode_match_item({"match": None}).match is None
    item = decode_match_item(match_json(4, "open", 1, 2))
    assert item.match.state is MatchState.OPEN


def test_decode_response_errors_short_circuit():
    # The tournament body is malformed, but errors win before decoding it
    response = decode_response(
        {"errors": ["Tournament has not started"], "tournament": {"state": "bogus"}}
    )
    assert response.has_errors
    assert response.tournament is None
    with pytest.raises(RemoteRejectionError) as excinfo:
        response.raise_for_errors(context="unable to resolve")
    assert str(excinfo.value) == "unable to resolve: Tournament has not started"
    assert excinfo.value.first_error == "Tournament has not started"


def test_decode_response_single_entities(participant_json, match_json):
    response = decode_response(participant_json(5, "Eve"))
    assert response.participant.name == "Eve"
    assert response.tournament is None
    response.raise_for_errors()

    response = decode_response(match_json(9, "complete", 1, 2, winner=2, scores="0-2"))
    assert response.match.player_two_score == 2


def test_decode_response_rejects_list():
    with pytest.raises(UnexpectedShapeError):
        decode_response([])


def test_decode_tournament_list(tournament_json):
    tournaments = decode_tournament_list(
        [tournament_json(id=1, url="a"), tournament_json(id=2, url="b")]
    )
    assert [t.url for t in tournaments] == ["a", "b"]


def test_decode_tournament_list_error_map():
    with pytest.raises(RemoteRejectionError):
        decode_tournament_list({"errors": ["Access denied"]})
    with pytest.raises(UnexpectedShapeError):
        decode_tournament_list({"tournament": {}})


def test_randomize_success_list(participant_json):
    result = decode_randomize_response(
        [participant_json(2, "Bob", seed=1), participant_json(1, "Alice", seed=2)]
    )
    assert isinstance(result, RandomizeAccepted)
    assert [p.name for p in result.participants] == ["Bob", "Alice"]


def test_randomize_error_map():
    result = decode_randomize_response({"errors": ["Tournament already started"]})
    assert isinstance(result, RandomizeRejected)
    assert result.errors == ["Tournament already started"]


@pytest.mark.parametrize("body", ["ok", 42, None, {"status": "done"}])
def test_randomize_unknown_shape(body):
    with pytest.raises(UnexpectedShapeError):
        decode_randomize_response(body)
