"""SQLAlchemy database models."""

from spreadsontoast.models.team import Team
from spreadsontoast.models.season import Season
from spreadsontoast.models.game import Game
from spreadsontoast.models.team_standing import TeamStanding
from spreadsontoast.models.team_line import TeamLine
from spreadsontoast.models.sign import Sign
from spreadsontoast.models.ballpark import Ballpark

__all__ = [
    "Team",
    "Season",
    "Game",
    "TeamStanding",
    "TeamLine",
    "Sign",
    "Ballpark",
]
