"""Constants for namecraft CLI."""

# Default file names (relative to the working directory)
DEFINITION_FILENAME = "definition.json"
ANSWERS_FILENAME = "answers.json"
CONFIG_FILENAME = "namecraft.toml"

# Process exit codes
EXIT_OK = 0
EXIT_DEFINITION_ERROR = 1
EXIT_CANCELLED = 1
EXIT_ANSWERS_ERROR = 2

FAREWELL_MESSAGE = "You requested to exit. Bye!"
DEFAULTS_ADVISORY = "Unable to access last answers. Reverting to defaults."
