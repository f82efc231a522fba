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

# --- Constants ---
API_VERSION = "v1"

# Route roots
TOURNAMENTS_ROUTE = "tournaments"
PARTICIPANTS_ROUTE = "participants"
MATCHES_ROUTE = "matches"

# HTTP methods the transport shell is asked to use
METHOD_GET = "GET"
METHOD_POST = "POST"
METHOD_PUT = "PUT"
METHOD_DELETE = "DELETE"

# Match list filters
FILTER_ALL = "all"
FILTER_OPEN = "open"

# Participant lookup keys
LOOKUP_ID = "id"
LOOKUP_NAME = "name"
LOOKUP_TAG = "tag"

# Wire envelope keys
WIRE_TOURNAMENT = "tournament"
WIRE_PARTICIPANT = "participant"
WIRE_MATCH = "match"
WIRE_PARTICIPANTS = "participants"
WIRE_MATCHES = "matches"
WIRE_ERRORS = "errors"

# Query flags asking the service to embed participants/matches
INCLUDE_PARTICIPANTS = "include_participants"
INCLUDE_MATCHES = "include_matches"
INCLUDE_FLAG = "1"

# Bracket-style parameter keys
PARAM_TOURNAMENT_NAME = "tournament[name]"
PARAM_TOURNAMENT_URL = "tournament[url]"
PARAM_TOURNAMENT_OPEN_SIGNUP = "tournament[open_signup]"
PARAM_TOURNAMENT_SUBDOMAIN = "tournament[subdomain]"
PARAM_TOURNAMENT_DESCRIPTION = "tournament[description]"
PARAM_TOURNAMENT_TYPE = "tournament[tournament_type]"
PARAM_MATCH_SCORES = "match[scores_csv]"
PARAM_MATCH_WINNER = "match[winner_id]"
PARAM_PARTICIPANT_NAME = "participant[name]"
PARAM_PARTICIPANT_MISC = "participant[misc]"

# List endpoint filters
PARAM_STATE = "state"
PARAM_TYPE = "type"
PARAM_SUBDOMAIN = "subdomain"
LIST_STATE_ALL = "all"
LIST_STATES = ("all", "pending", "in_progress", "ended")

# Score string separators ("3-1,2-3")
SET_SEPARATOR = ","
SCORE_SEPARATOR = "-"

# Sort key used by standings for participants without a final rank
UNRANKED = 10**9
