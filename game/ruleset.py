# Configuration: colors, code length, duplicates allowed, round budget
DEFAULT_RULES = {
    "name": "classic",  # Identifier for this ruleset
    "code_length": 4,  # Number of pegs in the code
    "num_colors": 6,  # Available colors (see color set below)
    "allow_duplicates": True,  # Can the secret code contain repeated colors?
    "max_attempts": 10,  # Round budget per game
    "colors": ["A", "B", "C", "D", "E", "F"],
    "display": {
        "emoji_map": {  # Used by the text renderer of the benchmark driver
            "A": "🔴",
            "B": "🟢",
            "C": "🔵",
            "D": "🟡",
            "E": "🟠",
            "F": "🟣",
            "BK": "⚫",
            "W": "⚪",
        }
    },
}
