import os

import dotenv
import humanfriendly

from . import constants

debug: bool = None


def load_from_env():
    global debug

    dotenv.load_dotenv(constants.DOT_ENV_FILE, verbose=False)

    if not debug:
        debug = humanfriendly.coerce_boolean(os.getenv(constants.DEBUG_ENV_VAR, ""))
