"""Type hints used in Bracket Graph."""

from typing import Dict, Literal, Optional

# Participant lookup keys
LookupKey = Literal["id", "name", "tag"]

# Match list filters
MatchFilter = Literal["all", "open"]

# Outbound parameter mapping handed to the transport shell
ParamMap = Dict[str, str]

# Prerequisite match reference on the wire (null when seeded directly)
MaybeMatchId = Optional[int]
