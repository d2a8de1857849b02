import logging
from typing import List

from blessings import Terminal

from . import utils
from .types import Choice


logger = logging.getLogger(__name__)


ABORT_CHOICE = {"name": "Abort", "value": "", "short": "Abort"}


def list_prompt(message: str, choices: List[Choice], abort: bool = True) -> str:
    """Ask the user to pick one of ``choices`` by number.

    Each choice is a dict with ``name`` (shown in the menu), ``value``
    (returned) and an optional ``short`` label echoed after selection.
    When ``abort`` is set an extra "Abort" entry is offered; picking it,
    or interrupting the prompt, returns an empty string.
    """
    term = Terminal()
    options = list(choices)
    if abort:
        options.append(ABORT_CHOICE)

    print("{t.bold}? {message}{t.normal}".format(t=term, message=message))
    for idx, choice in enumerate(options, start=1):
        print(
            "  {t.cyan}{idx}{t.normal}) {name}".format(
                t=term, idx=idx, name=choice["name"]
            )
        )

    try:
        response = utils.get_user_input(
            "Please select an option from the above list:",
            options=[str(idx) for idx in range(1, len(options) + 1)],
        )
    except (EOFError, KeyboardInterrupt):
        print("")
        logger.debug("Prompt %r interrupted by the user", message)
        return ""

    selected = options[int(response) - 1]
    print(
        "{t.dim}{short}{t.normal}".format(
            t=term, short=selected.get("short") or selected["name"]
        )
    )
    return selected["value"]


def confirm(message: str, default: bool = False) -> bool:
    try:
        return utils.get_user_input(
            "%s [%s]" % (message, "Y/n" if default else "y/N"),
            boolean=True,
            default=default,
        )
    except (EOFError, KeyboardInterrupt):
        print("")
        return False
