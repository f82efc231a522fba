import json
from io import StringIO

import pytest

from bracketgraph.cli import main


@pytest.fixture
def write_payload(tmp_path):
    def write(name, payload):
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return str(path)

    return write


def _run(*argv):
    out, err = StringIO(), StringIO()
    code = main(list(argv), out=out, err=err)
    return code, out.getvalue(), err.getvalue()


def test_summary(write_payload, bracket_payload):
    code, out, err = _run("summary", write_payload("t.json", bracket_payload))

    assert code == 0
    assert out.splitlines()[0] == "Spring Cup (spring_cup)"
    assert "state:        underway" in out
    assert "participants: 4" in out
    assert "open matches: 1" in out
    assert "completed:    no" in out
    assert err == ""


def test_standings(write_payload, bracket_payload):
    code, out, _ = _run("standings", write_payload("t.json", bracket_payload))

    assert code == 0
    lines = out.splitlines()
    assert "Rank" in lines[0]
    assert "Alice" in lines[1]
    assert len(lines) == 5


def test_open_matches(write_payload, bracket_payload):
    code, out, _ = _run("open-matches", write_payload("t.json", bracket_payload))
    assert code == 0
    assert out.strip() == "[B] round 1: #3 vs #4"


def test_no_open_matches(write_payload, two_player_payload):
    code, out, _ = _run("open-matches", write_payload("t.json", two_player_payload()))
    assert code == 0
    assert out.strip() == "No open matches"


def test_diff(write_payload, bracket_payload, match_json):
    after = json.loads(json.dumps(bracket_payload))
    after["tournament"]["matches"][1] = match_json(
        2, "complete", 3, 4, winner=4, scores="0-2", identifier="B"
    )

    code, out, _ = _run(
        "diff",
        write_payload("before.json", bracket_payload),
        write_payload("after.json", after),
    )
    assert code == 0
    assert out.strip() == "[B] open -> complete"


def test_diff_without_changes(write_payload, bracket_payload):
    path = write_payload("t.json", bracket_payload)
    code, out, _ = _run("diff", path, path)
    assert code == 0
    assert out.strip() == "No match changed state"


def test_consistency_errors_are_warnings(write_payload, two_player_payload):
    code, out, err = _run(
        "summary", write_payload("t.json", two_player_payload(player2=99))
    )
    assert code == 0
    assert "participants: 2" in out
    assert err.startswith("warning:")


def test_strict_config_fails_on_consistency_errors(write_payload, two_player_payload):
    config = write_payload("config.json", {"strict": True})
    code, _, err = _run(
        "--config",
        config,
        "summary",
        write_payload("t.json", two_player_payload(player2=99)),
    )
    assert code == 1
    assert err.startswith("error:")


@pytest.mark.parametrize("content", ["not json", '{"tournament": {"state": "x"}}'])
def test_invalid_file(tmp_path, content):
    path = tmp_path / "bad.json"
    path.write_text(content, encoding="utf-8")
    code, out, err = _run("summary", str(path))
    assert code == 1
    assert out == ""
    assert "error:" in err


def test_missing_file(tmp_path):
    code, _, err = _run("summary", str(tmp_path / "absent.json"))
    assert code == 1
    assert "error:" in err


def test_saved_error_response_reports_service_message(write_payload):
    path = write_payload("t.json", {"errors": ["Requested tournament not found"]})
    code, out, err = _run("summary", path)
    assert code == 1
    assert out == ""
    assert "Requested tournament not found" in err


def test_bare_tournament_object(write_payload, bracket_payload):
    path = write_payload("t.json", bracket_payload["tournament"])
    code, out, _ = _run("summary", path)
    assert code == 0
    assert out.startswith("Spring Cup (spring_cup)")
