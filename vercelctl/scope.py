import logging

from .exceptions import APIError, NotAuthorized, TeamDeleted
from .types import Scope, team_from_api, user_from_api


logger = logging.getLogger(__name__)


def get_user(client):
    try:
        data = client.fetch("/v2/user")
    except APIError as e:
        if e.status in (401, 403):
            raise NotAuthorized(
                "The specified token is not valid.  Use `vercelctl config "
                "--global --set auth.token <token>` to store a new one."
            )
        raise

    return user_from_api(data.get("user", data))


def get_team_by_id(client, team_id):
    try:
        data = client.fetch("/v2/teams/%s" % team_id)
    except APIError as e:
        if e.status in (403, 404):
            raise TeamDeleted(
                "Your team was deleted or you were removed from it.  Unset "
                "`main.current_team` with `vercelctl config --global --set "
                "main.current_team ''` to switch back to your personal scope."
            )
        raise

    return team_from_api(data)


def get_teams(client):
    data = client.fetch("/v2/teams")
    return [team_from_api(team) for team in data.get("teams", [])]


def get_scope(client):
    """Resolve the authenticated user and, if one is selected, their team."""
    user = get_user(client)

    team = None
    if client.current_team:
        team = get_team_by_id(client, client.current_team)

    logger.debug(
        "Resolved scope user=%s team=%s", user.username, team.slug if team else None
    )
    return Scope(user=user, team=team)
