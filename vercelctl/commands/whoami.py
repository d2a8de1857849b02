from vercelctl.exceptions import NotAuthorized, TeamDeleted
from vercelctl.plugin import CommandResult, DirectOutputCommandPlugin
from vercelctl.scope import get_scope


class Command(DirectOutputCommandPlugin):
    """Show the username of the authenticated user and the active team"""

    MIN_VERSION = "1.0.0"
    MAX_VERSION = "2.0.0"

    def main(self, client, **kwargs):
        try:
            scope = get_scope(client)
        except (NotAuthorized, TeamDeleted) as e:
            return CommandResult(
                "{t.red}Error:{t.normal} {message}", message=str(e), return_code=1
            )

        result = CommandResult(
            "{t.bold}{username}{t.normal}", username=scope.user.username
        )
        if scope.team is not None:
            result = result.add_line(
                "{t.dim}team:{t.normal} {slug}", slug=scope.team.slug
            )
        return result
