"""Shared builders for service-shaped JSON payloads."""

import pytest


def _participant_json(pid, name, misc="", seed=0, final_rank=None):
    return {
        "participant": {
            "id": pid,
            "display_name": name,
            "misc": misc,
            "seed": seed,
            "final_rank": final_rank,
        }
    }


def _match_json(
    mid,
    state,
    player1,
    player2,
    winner=None,
    scores="",
    round_number=1,
    identifier="",
    prereq1=None,
    prereq2=None,
):
    return {
        "match": {
            "id": mid,
            "identifier": identifier,
            "state": state,
            "round": round_number,
            "player1_id": player1,
            "player2_id": player2,
            "player1_prereq_match_id": prereq1,
            "player2_prereq_match_id": prereq2,
            "winner_id": winner,
            "scores_csv": scores,
            "updated_at": "2024-05-01T18:30:00.000-04:00",
        }
    }


def _tournament_json(participants=(), matches=(), state="underway", **fields):
    body = {
        "id": fields.pop("id", 1000),
        "url": fields.pop("url", "spring_cup"),
        "name": fields.pop("name", "Spring Cup"),
        "state": state,
        "subdomain": fields.pop("subdomain", None),
        "tournament_type": fields.pop("tournament_type", "single elimination"),
        "participants_count": len(participants),
        "started_at": "2024-05-01T18:00:00.000-04:00",
        "participants": list(participants),
        "matches": list(matches),
    }
    body.update(fields)
    return {"tournament": body}


@pytest.fixture
def participant_json():
    return _participant_json


@pytest.fixture
def match_json():
    return _match_json


@pytest.fixture
def tournament_json():
    return _tournament_json


@pytest.fixture
def two_player_payload():
    """P1 (id 1) and P2 (id 2) with one match 10 in the given state."""

    def build(state="complete", player2=2, winner=1, scores="3-1"):
        return _tournament_json(
            participants=[_participant_json(1, "P1"), _participant_json(2, "P2")],
            matches=[
                _match_json(
                    10,
                    state,
                    1,
                    player2,
                    winner=winner if state == "complete" else None,
                    scores=scores if state == "complete" else "",
                )
            ],
        )

    return build


@pytest.fixture
def bracket_payload():
    """Four-player single elimination: semis 1 and 2 feed final 3.

    Semi 1 (Alice beat Bob 2-1) is complete, semi 2 (Carol vs Dave) is
    open and the final waits on both.
    """
    return _tournament_json(
        participants=[
            _participant_json(1, "Alice", misc="alice@example.com", seed=1),
            _participant_json(2, "Bob", misc="team-red", seed=2),
            _participant_json(3, "Carol", misc="team-red", seed=3),
            _participant_json(4, "Dave", seed=4),
        ],
        matches=[
            _match_json(1, "complete", 1, 2, winner=1, scores="2-1", identifier="A"),
            _match_json(2, "open", 3, 4, identifier="B"),
            _match_json(
                3,
                "pending",
                1,
                None,
                round_number=2,
                identifier="C",
                prereq1=1,
                prereq2=2,
            ),
        ],
    )
