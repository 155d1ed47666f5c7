"""Static MLB reference data used by the seed scripts."""

from datetime import date

# abbreviation, city, name, conference, division, MLB team ID, primary, secondary
MLB_TEAMS = [
    ("ARI", "Arizona", "Diamondbacks", "NL", "NL_West", 109, "#A71930", "#E3D4AD"),
    ("ATL", "Atlanta", "Braves", "NL", "NL_East", 144, "#CE1141", "#13274F"),
    ("BAL", "Baltimore", "Orioles", "AL", "AL_East", 110, "#DF4601", "#000000"),
    ("BOS", "Boston", "Red Sox", "AL", "AL_East", 111, "#BD3039", "#0C2340"),
    ("CHC", "Chicago", "Cubs", "NL", "NL_Central", 112, "#0E3386", "#CC3433"),
    ("CIN", "Cincinnati", "Reds", "NL", "NL_Central", 113, "#C6011F", "#000000"),
    ("CLE", "Cleveland", "Guardians", "AL", "AL_Central", 114, "#0C2340", "#E31937"),
    ("COL", "Colorado", "Rockies", "NL", "NL_West", 115, "#333366", "#C4CED4"),
    ("CWS", "Chicago", "White Sox", "AL", "AL_Central", 145, "#000000", "#C4CED4"),
    ("DET", "Detroit", "Tigers", "AL", "AL_Central", 116, "#0C2340", "#FA4616"),
    ("HOU", "Houston", "Astros", "AL", "AL_West", 117, "#EB6E1F", "#002D62"),
    ("KC", "Kansas City", "Royals", "AL", "AL_Central", 118, "#004687", "#BD9B60"),
    ("LAA", "Los Angeles", "Angels", "AL", "AL_West", 108, "#BA0021", "#003263"),
    ("LAD", "Los Angeles", "Dodgers", "NL", "NL_West", 119, "#005A9C", "#FFFFFF"),
    ("MIA", "Miami", "Marlins", "NL", "NL_East", 146, "#00A3E0", "#EF3340"),
    ("MIL", "Milwaukee", "Brewers", "NL", "NL_Central", 158, "#12284B", "#FFC52F"),
    ("MIN", "Minnesota", "Twins", "AL", "AL_Central", 142, "#002B5C", "#D31145"),
    ("NYM", "New York", "Mets", "NL", "NL_East", 121, "#002D72", "#FF5910"),
    ("NYY", "New York", "Yankees", "AL", "AL_East", 147, "#0C2340", "#FFFFFF"),
    ("OAK", "Oakland", "Athletics", "AL", "AL_West", 133, "#003831", "#EFB21E"),
    ("PHI", "Philadelphia", "Phillies", "NL", "NL_East", 143, "#E81828", "#002D72"),
    ("PIT", "Pittsburgh", "Pirates", "NL", "NL_Central", 134, "#FDB827", "#000000"),
    ("SD", "San Diego", "Padres", "NL", "NL_West", 135, "#2F241D", "#FFC425"),
    ("SEA", "Seattle", "Mariners", "AL", "AL_West", 136, "#0C2C56", "#005C5C"),
    ("SF", "San Francisco", "Giants", "NL", "NL_West", 137, "#FD5A1E", "#27251F"),
    ("STL", "St. Louis", "Cardinals", "NL", "NL_Central", 138, "#C41E3A", "#0C2340"),
    ("TB", "Tampa Bay", "Rays", "AL", "AL_East", 139, "#092C5C", "#8FBCE6"),
    ("TEX", "Texas", "Rangers", "AL", "AL_West", 140, "#003278", "#C0111F"),
    ("TOR", "Toronto", "Blue Jays", "AL", "AL_East", 141, "#134A8E", "#E8291C"),
    ("WSH", "Washington", "Nationals", "NL", "NL_East", 120, "#AB0003", "#14225A"),
]

# season -> (name, start, lock, end)
MLB_SEASONS = {
    "2025": ("2025 MLB Season", date(2025, 3, 27), date(2025, 3, 27), date(2025, 9, 28)),
    "2026": ("2026 MLB Season", date(2026, 3, 26), date(2026, 3, 26), date(2026, 10, 1)),
}

# Preseason win totals by season
MLB_LINES = {
    "2025": {
        "NYY": 91.5, "BOS": 81.5, "TOR": 85.5, "BAL": 88.5, "TB": 86.5,
        "CLE": 82.5, "MIN": 83.5, "DET": 74.5, "CWS": 68.5, "KC": 73.5,
        "HOU": 89.5, "TEX": 86.5, "SEA": 84.5, "LAA": 76.5, "OAK": 58.5,
        "ATL": 92.5, "PHI": 88.5, "NYM": 84.5, "MIA": 70.5, "WSH": 67.5,
        "MIL": 85.5, "CHC": 81.5, "CIN": 78.5, "STL": 79.5, "PIT": 72.5,
        "LAD": 96.5, "SF": 79.5, "SD": 85.5, "ARI": 84.5, "COL": 62.5,
    },
    "2026": {
        "ARI": 79.5, "ATL": 88.5, "BAL": 84.5, "BOS": 87.5, "CHC": 88.5,
        "CIN": 82.5, "CLE": 80.5, "COL": 52.5, "CWS": 66.5, "DET": 85.5,
        "HOU": 86.5, "KC": 81.5, "LAA": 70.5, "LAD": 102.5, "MIA": 72.5,
        "MIL": 84.5, "MIN": 73.5, "NYM": 89.5, "NYY": 91.5, "OAK": 75.5,
        "PHI": 90.5, "PIT": 76.5, "SD": 85.5, "SEA": 89.5, "SF": 80.5,
        "STL": 69.5, "TB": 77.5, "TEX": 83.5, "TOR": 88.5, "WSH": 65.5,
    },
}

# Field orientation is compass degrees from home plate to center field.
# Elevation in feet above sea level.
BALLPARKS = [
    {"team": "ARI", "name": "Chase Field", "mlb_venue_id": 15, "city": "Phoenix", "state": "AZ", "lat": 33.45, "lng": -112.07, "elevation": 1082, "field_orientation": 198, "roof_type": "retractable"},
    {"team": "ATL", "name": "Truist Park", "mlb_venue_id": 4705, "city": "Atlanta", "state": "GA", "lat": 33.89, "lng": -84.47, "elevation": 1050, "field_orientation": 225, "roof_type": "open"},
    {"team": "BAL", "name": "Oriole Park at Camden Yards", "mlb_venue_id": 2, "city": "Baltimore", "state": "MD", "lat": 39.28, "lng": -76.62, "elevation": 30, "field_orientation": 218, "roof_type": "open"},
    {"team": "BOS", "name": "Fenway Park", "mlb_venue_id": 3, "city": "Boston", "state": "MA", "lat": 42.35, "lng": -71.10, "elevation": 20, "field_orientation": 65, "roof_type": "open"},
    {"team": "CHC", "name": "Wrigley Field", "mlb_venue_id": 17, "city": "Chicago", "state": "IL", "lat": 41.95, "lng": -87.66, "elevation": 600, "field_orientation": 198, "roof_type": "open"},
    {"team": "CWS", "name": "Rate Field", "mlb_venue_id": 4, "city": "Chicago", "state": "IL", "lat": 41.83, "lng": -87.63, "elevation": 595, "field_orientation": 225, "roof_type": "open"},
    {"team": "CIN", "name": "Great American Ball Park", "mlb_venue_id": 2602, "city": "Cincinnati", "state": "OH", "lat": 39.10, "lng": -84.51, "elevation": 490, "field_orientation": 195, "roof_type": "open"},
    {"team": "CLE", "name": "Progressive Field", "mlb_venue_id": 5, "city": "Cleveland", "state": "OH", "lat": 41.50, "lng": -81.69, "elevation": 660, "field_orientation": 195, "roof_type": "open"},
    {"team": "COL", "name": "Coors Field", "mlb_venue_id": 19, "city": "Denver", "state": "CO", "lat": 39.76, "lng": -104.99, "elevation": 5280, "field_orientation": 225, "roof_type": "open"},
    {"team": "DET", "name": "Comerica Park", "mlb_venue_id": 2394, "city": "Detroit", "state": "MI", "lat": 42.34, "lng": -83.05, "elevation": 600, "field_orientation": 215, "roof_type": "open"},
    {"team": "HOU", "name": "Minute Maid Park", "mlb_venue_id": 2392, "city": "Houston", "state": "TX", "lat": 29.76, "lng": -95.36, "elevation": 40, "field_orientation": 225, "roof_type": "retractable"},
    {"team": "KC", "name": "Kauffman Stadium", "mlb_venue_id": 7, "city": "Kansas City", "state": "MO", "lat": 39.05, "lng": -94.48, "elevation": 820, "field_orientation": 225, "roof_type": "open"},
    {"team": "LAA", "name": "Angel Stadium of Anaheim", "mlb_venue_id": 1, "city": "Anaheim", "state": "CA", "lat": 33.80, "lng": -117.88, "elevation": 160, "field_orientation": 225, "roof_type": "open"},
    {"team": "LAD", "name": "Dodger Stadium", "mlb_venue_id": 22, "city": "Los Angeles", "state": "CA", "lat": 34.07, "lng": -118.24, "elevation": 515, "field_orientation": 225, "roof_type": "open"},
    {"team": "MIA", "name": "loanDepot Park", "mlb_venue_id": 4169, "city": "Miami", "state": "FL", "lat": 25.78, "lng": -80.22, "elevation": 7, "field_orientation": 225, "roof_type": "retractable"},
    {"team": "MIL", "name": "American Family Field", "mlb_venue_id": 32, "city": "Milwaukee", "state": "WI", "lat": 43.03, "lng": -87.97, "elevation": 635, "field_orientation": 225, "roof_type": "retractable"},
    {"team": "MIN", "name": "Target Field", "mlb_venue_id": 3312, "city": "Minneapolis", "state": "MN", "lat": 44.98, "lng": -93.28, "elevation": 815, "field_orientation": 225, "roof_type": "open"},
    {"team": "NYM", "name": "Citi Field", "mlb_venue_id": 3289, "city": "New York", "state": "NY", "lat": 40.76, "lng": -73.85, "elevation": 20, "field_orientation": 225, "roof_type": "open"},
    {"team": "NYY", "name": "Yankee Stadium", "mlb_venue_id": 3313, "city": "New York", "state": "NY", "lat": 40.83, "lng": -73.93, "elevation": 55, "field_orientation": 225, "roof_type": "open"},
    {"team": "OAK", "name": "Sutter Health Park", "mlb_venue_id": 2529, "city": "Sacramento", "state": "CA", "lat": 38.58, "lng": -121.51, "elevation": 25, "field_orientation": 225, "roof_type": "open"},
    {"team": "PHI", "name": "Citizens Bank Park", "mlb_venue_id": 2681, "city": "Philadelphia", "state": "PA", "lat": 39.91, "lng": -75.17, "elevation": 20, "field_orientation": 225, "roof_type": "open"},
    {"team": "PIT", "name": "PNC Park", "mlb_venue_id": 31, "city": "Pittsburgh", "state": "PA", "lat": 40.45, "lng": -80.01, "elevation": 730, "field_orientation": 225, "roof_type": "open"},
    {"team": "SD", "name": "Petco Park", "mlb_venue_id": 2680, "city": "San Diego", "state": "CA", "lat": 32.71, "lng": -117.16, "elevation": 15, "field_orientation": 225, "roof_type": "open"},
    {"team": "SF", "name": "Oracle Park", "mlb_venue_id": 2395, "city": "San Francisco", "state": "CA", "lat": 37.78, "lng": -122.39, "elevation": 5, "field_orientation": 225, "roof_type": "open"},
    {"team": "SEA", "name": "T-Mobile Park", "mlb_venue_id": 680, "city": "Seattle", "state": "WA", "lat": 47.59, "lng": -122.33, "elevation": 20, "field_orientation": 225, "roof_type": "retractable"},
    {"team": "STL", "name": "Busch Stadium", "mlb_venue_id": 2889, "city": "St. Louis", "state": "MO", "lat": 38.62, "lng": -90.19, "elevation": 465, "field_orientation": 225, "roof_type": "open"},
    {"team": "TB", "name": "Tropicana Field", "mlb_venue_id": 12, "city": "St. Petersburg", "state": "FL", "lat": 27.77, "lng": -82.65, "elevation": 45, "field_orientation": 225, "roof_type": "dome"},
    {"team": "TEX", "name": "Globe Life Field", "mlb_venue_id": 5325, "city": "Arlington", "state": "TX", "lat": 32.75, "lng": -97.08, "elevation": 545, "field_orientation": 225, "roof_type": "retractable"},
    {"team": "TOR", "name": "Rogers Centre", "mlb_venue_id": 14, "city": "Toronto", "state": "ON", "lat": 43.64, "lng": -79.39, "elevation": 250, "field_orientation": 315, "roof_type": "retractable"},
    {"team": "WSH", "name": "Nationals Park", "mlb_venue_id": 3309, "city": "Washington", "state": "DC", "lat": 38.87, "lng": -77.01, "elevation": 25, "field_orientation": 225, "roof_type": "open"},
]
