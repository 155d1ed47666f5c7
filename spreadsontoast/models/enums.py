"""String enums stored in model columns."""

from enum import Enum


class Sport(str, Enum):
    MLB = "MLB"


class Conference(str, Enum):
    AL = "AL"
    NL = "NL"


class Division(str, Enum):
    AL_EAST = "AL_East"
    AL_CENTRAL = "AL_Central"
    AL_WEST = "AL_West"
    NL_EAST = "NL_East"
    NL_CENTRAL = "NL_Central"
    NL_WEST = "NL_West"


class SeasonStatus(str, Enum):
    UPCOMING = "Upcoming"
    ACTIVE = "Active"
    COMPLETED = "Completed"


class GameType(str, Enum):
    SPRING_TRAINING = "SpringTraining"
    REGULAR_SEASON = "RegularSeason"
    EXHIBITION = "Exhibition"
    WILD_CARD = "WildCard"
    DIVISION_SERIES = "DivisionSeries"
    LEAGUE_CHAMPIONSHIP = "LeagueChampionship"
    WORLD_SERIES = "WorldSeries"
    POSTSEASON = "Postseason"


class GameState(str, Enum):
    PREVIEW = "Preview"
    LIVE = "Live"
    FINAL = "Final"


# Display order used by standings boards and sign slides
DIVISION_ORDER = [
    Division.NL_EAST,
    Division.NL_CENTRAL,
    Division.NL_WEST,
    Division.AL_EAST,
    Division.AL_CENTRAL,
    Division.AL_WEST,
]

DIVISION_DISPLAY_NAMES = {
    Division.AL_EAST: "AL East",
    Division.AL_CENTRAL: "AL Central",
    Division.AL_WEST: "AL West",
    Division.NL_EAST: "NL East",
    Division.NL_CENTRAL: "NL Central",
    Division.NL_WEST: "NL West",
}

CONFERENCE_DISPLAY_NAMES = {
    Conference.AL: "American League",
    Conference.NL: "National League",
}
