from vercelctl.plugin import CommandResult, DirectOutputCommandPlugin
from vercelctl import __version__


class Command(DirectOutputCommandPlugin):
    """Show the installed vercelctl version"""

    MIN_VERSION = "1.0.0"
    MAX_VERSION = "2.0.0"
    REQUIRES_CLIENT = False

    def main(self, **kwargs):
        return CommandResult(
            "vercelctl {t.bold}{version}{t.normal}", version=__version__
        )
