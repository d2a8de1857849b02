import configparser
import importlib.metadata
import logging
import os
import shutil
import subprocess
import sys
import webbrowser

from . import constants
from .client import Client
from .plugin import CommandPlugin


logger = logging.getLogger(__name__)


def convert_to_boolean(string):
    if string.upper().strip() in ["Y", "YES", "ON", "ENABLED", "ENABLE", "TRUE"]:
        return True
    elif string.upper().strip() in ["N", "NO", "OFF", "DISABLED", "DISABLE", "FALSE"]:
        return False
    return None


def get_user_input(message, options=None, boolean=False, default=None):
    if not constants.ALLOW_USER_INPUT:
        raise RuntimeError("User input is disabled")

    value = None
    while value is None:
        raw_value = input(message + " ")

        if not raw_value.strip() and default is not None:
            value = default
        elif options and raw_value not in options:
            print("'%s' is not a valid response" % raw_value)
            continue
        elif boolean:
            result = convert_to_boolean(raw_value)
            if result is not None:
                value = result
            else:
                print("'%s' is not a valid response" % raw_value)
        elif raw_value.strip():
            value = raw_value.strip()
        else:
            print("Please enter a response")

    return value


def get_installed_commands():
    possible_commands = {}
    for entry_point in importlib.metadata.entry_points(group="vercelctl_commands"):
        try:
            loaded_class = entry_point.load()
        except ImportError:
            logger.warning(
                "Attempted to load entrypoint %s, but " "an ImportError occurred.",
                entry_point,
            )
            continue
        if not issubclass(loaded_class, CommandPlugin):
            logger.warning(
                "Loaded entrypoint %s, but loaded class is "
                "not a subclass of `vercelctl.plugin.CommandPlugin`.",
                entry_point,
            )
            continue
        possible_commands[entry_point.name] = loaded_class

    return possible_commands


def get_config_path(filename):
    if filename.startswith("/"):
        return filename
    return os.path.expanduser("~/%s" % filename)


def get_config(additional_configs=None, include_global=True):
    filenames = []
    if include_global:
        filenames.append(get_config_path(constants.GLOBAL_CONFIG))
    if additional_configs:
        filenames.extend(additional_configs)

    parser = configparser.RawConfigParser()
    parser.read(filenames)
    return parser


def set_global_config_value(section, key, value):
    config = get_config()
    if not config.has_section(section):
        config.add_section(section)
    config.set(section, key, value)
    with open(get_config_path(constants.GLOBAL_CONFIG), "w") as out:
        config.write(out)


def get_token(config=None):
    if config is None:
        config = get_config()

    if config.has_option(constants.CONFIG_AUTH, "token"):
        return config.get(constants.CONFIG_AUTH, "token")

    return os.environ.get(constants.TOKEN_ENVIRONMENT_VARIABLE)


def get_current_team(config=None):
    if config is None:
        config = get_config()

    if config.has_option(constants.CONFIG_MAIN, "current_team"):
        return config.get(constants.CONFIG_MAIN, "current_team") or None

    return None


def get_client(token=None, team=None, config=None):
    if config is None:
        config = get_config()

    if token is None:
        token = get_token(config)
    if team is None:
        team = get_current_team(config)

    api_url = constants.API_URL
    if config.has_option(constants.CONFIG_MAIN, "api_url"):
        api_url = config.get(constants.CONFIG_MAIN, "api_url")

    return Client(token=token, api_url=api_url, current_team=team)


def lazy_get_client(token=None, team=None):
    return lambda config=None: get_client(token, team, config)


def get_opener():
    if sys.platform == "darwin":
        return ["open"]
    return ["xdg-open"]


def launch_url(url):
    if sys.platform.startswith("win"):
        # The URL is handed to the shell association, never to cmd.exe
        os.startfile(url)
        return True

    opener = get_opener()
    if shutil.which(opener[0]) is None:
        logger.debug(
            "Opener %s not found; falling back to the webbrowser module.", opener[0]
        )
        return webbrowser.open(url)

    # Fire and forget
    subprocess.Popen(
        opener + [url],
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
    )
    return True
