"""Command-line inspection of saved tournament responses.

Each command reads a decoded JSON body saved from the tournament service
(a ``{"tournament": {...}}`` response or a bare tournament object),
resolves it and prints a plain-text view.
"""

# Bracket Graph
# Copyright (C) 2025  Bracket Graph developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from bracketgraph.config import EngineConfig, load_config
from bracketgraph.exceptions import BracketGraphException
from bracketgraph.graph import (
    RelationResolver,
    ResolvedGraph,
    get_open_matches,
    is_completed,
    standings,
    state_transitions,
)
from bracketgraph.models import Match
from bracketgraph.utils import configure_logging, setup_logger
from bracketgraph.wire import decode_response, decode_tournament

logger = setup_logger(__name__)


def load_graph(path: str, config: EngineConfig) -> ResolvedGraph:
    """Read, decode and resolve one saved response.

    Accepts the service's ``{"tournament": {...}}`` body or a bare
    tournament object. An ``errors`` body is reported as such.

    Raises:
        RemoteRejectionError: If the saved response carries errors
        BracketGraphException: If the file does not hold a valid tournament
        OSError: If the file cannot be read
    """
    with open(Path(path), "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise BracketGraphException(f"{path} is not valid JSON: {e}") from e
    response = decode_response(data)
    response.raise_for_errors(context=str(path))
    tournament = response.tournament or decode_tournament(data)
    return RelationResolver(strict=config.strict).resolve(tournament)


def _player_label(match: Match, side: int) -> str:
    player = match.player_one if side == 1 else match.player_two
    player_id = match.player_one_id if side == 1 else match.player_two_id
    if player is not None:
        return player.name
    return f"#{player_id}" if player_id else "TBD"


def _print_errors(graph: ResolvedGraph, err: TextIO) -> None:
    for error in graph.errors:
        print(f"warning: {error}", file=err)


def cmd_summary(graph: ResolvedGraph, out: TextIO) -> None:
    tournament = graph.tournament
    type_name = tournament.tournament_type.value if tournament.tournament_type else "-"
    print(f"{tournament.name} ({tournament.get_url()})", file=out)
    print(f"  state:        {tournament.state.value}", file=out)
    print(f"  type:         {type_name}", file=out)
    print(f"  participants: {len(tournament.participants)}", file=out)
    print(f"  matches:      {len(tournament.matches)}", file=out)
    print(f"  open matches: {len(get_open_matches(tournament))}", file=out)
    print(f"  completed:    {'yes' if is_completed(tournament) else 'no'}", file=out)


def cmd_standings(graph: ResolvedGraph, out: TextIO) -> None:
    print(f"{'Rank':>4}  {'Name':<24} {'W':>3} {'L':>3} {'Score':>6}", file=out)
    for position, participant in enumerate(standings(graph.tournament), start=1):
        rank = participant.final_rank if participant.final_rank is not None else position
        print(
            f"{rank:>4}  {participant.name:<24} {participant.wins:>3} "
            f"{participant.losses:>3} {participant.total_score:>6}",
            file=out,
        )


def cmd_open_matches(graph: ResolvedGraph, out: TextIO) -> None:
    open_matches = get_open_matches(graph.tournament)
    if not open_matches:
        print("No open matches", file=out)
        return
    for match in open_matches:
        print(
            f"[{match.identifier or match.id}] round {match.round}: "
            f"{_player_label(match, 1)} vs {_player_label(match, 2)}",
            file=out,
        )


def cmd_diff(before: ResolvedGraph, after: ResolvedGraph, out: TextIO) -> None:
    transitions = list(state_transitions(before.matches, after.matches))
    if not transitions:
        print("No match changed state", file=out)
        return
    for transition in transitions:
        match = transition.match
        print(
            f"[{match.identifier or match.id}] {transition.previous.value} -> "
            f"{transition.current.value}",
            file=out,
        )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="bracketgraph",
        description="Inspect saved tournament service responses",
    )
    parser.add_argument("--config", help="Load configuration from JSON file")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("summary", "Show tournament state and counts"),
        ("standings", "Show participants with derived wins, losses and scores"),
        ("open-matches", "List matches that are currently open"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("file", help="Saved tournament response (JSON)")

    diff = subparsers.add_parser("diff", help="Show matches whose state changed")
    diff.add_argument("before", help="Earlier tournament response (JSON)")
    diff.add_argument("after", help="Later tournament response (JSON)")

    return parser


def main(
    argv: Optional[List[str]] = None,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> int:
    """Main entry point for CLI.

    Returns:
        Exit code
    """
    out = out or sys.stdout
    err = err or sys.stderr
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
        configure_logging(debug=args.verbose or config.debug)

        if args.command == "diff":
            before = load_graph(args.before, config)
            after = load_graph(args.after, config)
            _print_errors(before, err)
            _print_errors(after, err)
            cmd_diff(before, after, out)
            return 0

        graph = load_graph(args.file, config)
        _print_errors(graph, err)
        if args.command == "summary":
            cmd_summary(graph, out)
        elif args.command == "standings":
            cmd_standings(graph, out)
        else:
            cmd_open_matches(graph, out)
        return 0
    except (BracketGraphException, OSError) as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {e}", file=err)
        return 1


if __name__ == "__main__":
    sys.exit(main())
