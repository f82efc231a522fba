from bracketgraph.wire.payload import (
    decode_match,
    decode_match_item,
    decode_participant,
    decode_participant_item,
    decode_participant_list,
    decode_tournament,
)
from bracketgraph.wire.responses import (
    APIResponse,
    RandomizeAccepted,
    RandomizeRejected,
    RandomizeResult,
    decode_randomize_response,
    decode_response,
    decode_tournament_list,
)

__all__ = [
    "APIResponse",
    "RandomizeAccepted",
    "RandomizeRejected",
    "RandomizeResult",
    "decode_match",
    "decode_match_item",
    "decode_participant",
    "decode_participant_item",
    "decode_participant_list",
    "decode_randomize_response",
    "decode_response",
    "decode_tournament",
    "decode_tournament_list",
]
