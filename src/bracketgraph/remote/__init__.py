from bracketgraph.remote.calls import RemoteCall, TournamentRequest
from bracketgraph.remote.session import BracketSession

__all__ = ["BracketSession", "RemoteCall", "TournamentRequest"]
