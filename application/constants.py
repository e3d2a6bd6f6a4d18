"""Application-level constants."""

# Report formatting
PAIR_SEPARATOR = "; "
NO_MATCHES_SENTINEL = "0"

# Output formats accepted by the CLI
FORMAT_TEXT = "text"
FORMAT_JSON = "json"
OUTPUT_FORMATS = (FORMAT_TEXT, FORMAT_JSON)
