"""Read-only NFL resource routes.

    teams.py            /teams, /teams/{id}, /teams/division/{divisionId}
    players.py          /players, /players/{id}, /players/team/{teamId}
    conferences.py      /conferences
    position_types.py   /position-types
    schedule.py         /schedule

Handlers build a query from `queries.py` and hand it to `responses.compose`;
none of them touches the store or shapes errors itself. `create_app` mounts
`router` under the configured API prefix.
"""

from .api_router import router
