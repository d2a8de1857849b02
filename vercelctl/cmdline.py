import argparse
import logging
import logging.config
import os
import sys
import time
import traceback

import requests
from blessings import Terminal

from . import utils
from .exceptions import APIError, UsageError, VercelctlError


logger = logging.getLogger(__name__)


LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "pretty": {"format": "[%(levelname)s] %(message)s"},
        "file": {"format": "%(asctime)s\t%(levelname)s\t%(module)s\t%(message)s"},
    },
    "handlers": {
        "console": {
            "level": "DEBUG",
            "class": "logging.StreamHandler",
            "formatter": "pretty",
            "stream": "ext://sys.stdout",
        }
    },
    "root": {"handlers": ["console"], "level": "INFO"},
}


def get_parser(commands):
    parser = argparse.ArgumentParser(
        description="Open and link Vercel projects from your terminal",
        add_help=False,
    )
    parser.add_argument("command", type=str, choices=sorted(commands.keys()))
    parser.add_argument(
        "--log-level",
        default="INFO",
        dest="log_level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
    )
    parser.add_argument("--cwd", dest="folder", default=os.getcwd())
    parser.add_argument(
        "--token",
        default=None,
        help="Authentication token to use instead of the configured one.",
    )
    parser.add_argument(
        "--scope",
        default=None,
        help="Team ID to run the command as instead of the configured one.",
    )
    parser.add_argument(
        "--traceback", action="store_true", default=False,
    )
    return parser


def main():
    term = Terminal()

    commands = utils.get_installed_commands()

    parser = get_parser(commands)
    args, extra = parser.parse_known_args()

    logging.config.dictConfig(LOGGING)
    root_logger = logging.getLogger()
    root_logger.setLevel(args.log_level)

    command_name = args.command
    cmd_class = commands[command_name]

    started = time.time()
    logger.debug("Command %s(%s) started", command_name, extra)
    client = utils.lazy_get_client(token=args.token, team=args.scope)
    try:
        value = cmd_class.execute_command(
            extra, client=client, path=args.folder, command_name=command_name
        )
        logger.debug(
            "Command %s(%s) finished in %s seconds",
            command_name,
            extra,
            (time.time() - started),
        )
        if value:
            value.echo()
        sys.exit(value.return_code)
    except UsageError as e:
        print(
            "{t.red}Error:{t.normal} {error}\n"
            "Run `{prog} {cmd} --help` for usage information.".format(
                t=term,
                error=str(e),
                prog=os.path.basename(sys.argv[0]),
                cmd=command_name,
            )
        )
        sys.exit(1)
    except (APIError, requests.RequestException) as e:
        print(
            "{t.red}vercelctl encountered an error while communicating with "
            "the Vercel API: {t.normal}{t.red}{t.bold}{error}"
            "{t.normal}".format(t=term, error=str(e))
        )
        if args.traceback:
            traceback.print_exc()
        sys.exit(70)
    except VercelctlError as e:
        print(
            "{t.red}vercelctl encountered an error processing your "
            "request: {t.normal}{t.red}{t.bold}{error}{t.normal}".format(
                t=term, error=str(e)
            )
        )
        if args.traceback:
            traceback.print_exc()
        sys.exit(90)
