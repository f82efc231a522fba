from bracketgraph.graph.differ import MatchTransition, diff_matches, state_transitions
from bracketgraph.graph.query import (
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
    standings,
)
from bracketgraph.graph.resolver import (
    RelationResolver,
    ResolvedGraph,
    attach_references,
    resolve_relations,
)

__all__ = [
    "RelationResolver",
    "ResolvedGraph",
    "attach_references",
    "resolve_relations",
    "find_participant",
    "get_participant",
    "get_participant_by_name",
    "get_participant_by_tag",
    "require_participant",
    "list_matches",
    "get_open_matches",
    "get_match",
    "require_match",
    "open_match_for",
    "prerequisite_matches",
    "is_completed",
    "standings",
    "MatchTransition",
    "diff_matches",
    "state_transitions",
]
