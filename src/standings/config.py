from pathlib import Path

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Data directories
DATA_DIR = PROJECT_ROOT / "data"
REPORTS_DIR = DATA_DIR / "reports"

# Tie-break cascade, highest priority first
TIE_BREAK_KEYS = ("score", "spice", "solari", "water")

# Leader table sort modes
MODE_MOST_USED = "most_used"
MODE_BEST_SCORE = "best_score"      # per-player table only
MODE_BEST_WINRATE = "best_winrate"  # group-wide table only

PLAYER_LEADER_MODES = {MODE_MOST_USED, MODE_BEST_SCORE}
GLOBAL_LEADER_MODES = {MODE_MOST_USED, MODE_BEST_WINRATE}

# Rows shown in the leader tables unless "show all" is requested
PLAYER_LEADER_LIMIT = 5
GLOBAL_LEADER_LIMIT = 7

# Rounds summary buckets: label -> exact participant count
ROUNDS_BUCKETS = {
    "three_player": 3,
    "four_player": 4,
}

# Decimal places for reported figures
RATE_PLACES = 1
AVG_PLACEMENT_PLACES = 2
