DOT_ENV_FILE = ".env"

LOGGER_NAME = "inflector"

DEBUG_ENV_VAR = "INFLECTOR_DEBUG"
