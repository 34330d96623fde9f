"""
Constants used throughout the application.
"""

# Input
DEFAULT_SENTINEL = "END"
INPUT_PROMPT = "Enter your code (type '{sentinel}' on a new line to finish):"

# Output formats
OUTPUT_DETAILED = "detailed"
OUTPUT_TABLE = "table"
OUTPUT_JSON = "json"
OUTPUT_FORMATS = (OUTPUT_DETAILED, OUTPUT_TABLE, OUTPUT_JSON)
