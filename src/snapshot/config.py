# Tables expected in a snapshot export, with the columns each must carry
EXPORT_COLUMNS = {
    "players": ["id", "name"],
    "leaders": ["id", "name"],
    "games": ["id", "name"],
    "expansions": ["id", "name"],
    "matches": [
        "id", "date", "game_id",
        "with_expansion", "expansion_id", "with_family_atomic",
        "played_rounds",
    ],
    "results": [
        "id", "match_id", "player_id", "leader_id",
        "score", "spice", "solari", "water",
    ],
}

# Tables that must be present (the rest default to empty)
REQUIRED_TABLES = {"matches", "results"}

# Integer counters recorded per result
COUNTER_COLUMNS = ["score", "spice", "solari", "water"]

# Columns holding record identifiers
ID_COLUMNS = {
    "players": ["id"],
    "leaders": ["id"],
    "games": ["id"],
    "expansions": ["id"],
    "matches": ["id", "game_id", "expansion_id"],
    "results": ["id", "match_id", "player_id", "leader_id"],
}
