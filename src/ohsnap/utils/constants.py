"""Constants for the snapshot literal syntax and engine limits."""

# Snapshot literal syntax
CALL_MARKER = "snap("
BLOCK_MARKER = "\\\\"
COMMENT_BLOCK_MARKER = "#|"
UPDATE_MARKER = "<!update>"

# Ignore regions
IGNORE_OPEN = "<^"
IGNORE_CLOSE = "$>"
IGNORE_REGION_PATTERN = r"<\^[^\n]+?\$>"
MAX_IGNORE_REGIONS = 10

# Updater
MAX_SOURCE_BYTES = 1024 * 1024
