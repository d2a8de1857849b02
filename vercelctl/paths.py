import logging
import os

from . import prompt
from .types import PathValidation


logger = logging.getLogger(__name__)


def validate_paths(client, paths):
    if len(paths) > 1:
        logger.error("Only one path may be given to this command.")
        return PathValidation(valid=False, path=None, exit_code=1)

    path = os.path.realpath(paths[0])

    if not os.path.exists(path):
        logger.error("The specified path %s does not exist.", path)
        return PathValidation(valid=False, path=None, exit_code=1)

    if not os.path.isdir(path):
        logger.error("The specified path %s is not a directory.", path)
        return PathValidation(valid=False, path=None, exit_code=1)

    if path == os.path.realpath(os.path.expanduser("~")):
        if not prompt.confirm(
            "You are running this command from your home directory.  "
            "Do you want to continue?"
        ):
            logger.info("Aborted")
            return PathValidation(valid=False, path=None, exit_code=0)

    return PathValidation(valid=True, path=path, exit_code=0)
