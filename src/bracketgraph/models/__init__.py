from bracketgraph.models.enums import MatchState, TournamentState, TournamentType
from bracketgraph.models.items import MatchItem, ParticipantItem
from bracketgraph.models.match import Match, format_scores, parse_scores_csv
from bracketgraph.models.participant import Participant
from bracketgraph.models.tournament import Tournament

__all__ = [
    "Tournament",
    "TournamentState",
    "TournamentType",
    "Participant",
    "ParticipantItem",
    "Match",
    "MatchItem",
    "MatchState",
    "format_scores",
    "parse_scores_csv",
]
