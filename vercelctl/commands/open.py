import logging
import textwrap

import requests

from vercelctl import constants, utils
from vercelctl.exceptions import APIError, NotAuthorized, TeamDeleted
from vercelctl.link import ensure_link
from vercelctl.paths import validate_paths
from vercelctl.plugin import CommandResult, DirectOutputCommandPlugin
from vercelctl.prompt import list_prompt
from vercelctl.scope import get_scope
from vercelctl.types import Project, Team


logger = logging.getLogger(__name__)


class Command(DirectOutputCommandPlugin):
    """Open the dashboard, inspector, or latest deployments of the linked
    project in your web browser"""

    MIN_VERSION = "1.0.0"
    MAX_VERSION = "2.0.0"

    def get_epilog(self):
        return textwrap.dedent(
            """\
            Examples:

              Choose what to open from an interactive menu

                $ vercelctl open

              Link the current directory without being asked first

                $ vercelctl open --yes
            """
        )

    def handle(self, args, client, path, **kwargs):
        return self.cmd(client, path, yes=args.yes)

    def main(self, client, path, yes=False):
        try:
            scope = get_scope(client)
        except (NotAuthorized, TeamDeleted) as e:
            return CommandResult(
                "{t.red}Error:{t.normal} {message}", message=str(e), return_code=1
            )

        validation = validate_paths(client, [path])
        if not validation.valid:
            return CommandResult(return_code=validation.exit_code)

        linked_project = ensure_link("link", client, validation.path, yes)
        if isinstance(linked_project, int):
            return CommandResult(return_code=linked_project)

        project, org = linked_project
        team = None
        if org.type == "team":
            team = Team(id=org.id, slug=org.slug, name=None)
        elif scope.team is not None:
            logger.debug("Project is personal; ignoring team %s", scope.team.slug)
        client.current_team = team.id if team else None

        choice = list_prompt(
            "What do you want to open?", self.get_choices(client, project, org, team),
        )
        if choice == constants.NOT_FOUND:
            return CommandResult(
                "No deployments found. Run {t.cyan}`vercelctl deploy`{t.normal} "
                "to create a deployment.",
                return_code=1,
            )
        if choice == "":
            logger.debug("User aborted the selection")
            return CommandResult(return_code=0)

        utils.launch_url(choice)
        return CommandResult(
            "\U0001FA84 Opened {t.bold}{t.underline}{url}{t.normal}", url=choice
        )

    def get_choices(self, client, project, org, team):
        dashboard_url = self.get_dashboard_url(org, project)
        inspector_url = self.get_inspector_url(client, project, org, team)
        latest_deployment_url = self.get_latest_deployment_url(client, project, team)
        latest_production_url = self.get_latest_prod_deployment(
            client, project, team
        )

        return [
            {"name": "Dashboard", "value": dashboard_url, "short": "Dashboard"},
            {
                "name": "Latest Deployment Inspector",
                "value": inspector_url or constants.NOT_FOUND,
                "short": "Deployment Inspector",
            },
            {
                "name": "Latest Preview Deployment",
                "value": latest_deployment_url or constants.NOT_FOUND,
                "short": "Latest Preview Deployment",
            },
            {
                "name": "Latest Production Deployment",
                "value": latest_production_url or constants.NOT_FOUND,
                "short": "Latest Production Deployment",
            },
        ]

    def get_dashboard_url(self, org, project):
        return "%s/%s/%s" % (constants.DASHBOARD_URL, org.slug, project.name)

    def get_inspector_url(self, client, project, org, team):
        proj = self.get_project(client, project, team)
        if proj is None or proj.latest_deployment is None:
            return None

        deployment_id = proj.latest_deployment.get("id")
        if not deployment_id:
            return None

        deployment_id = deployment_id.replace(constants.DEPLOYMENT_ID_PREFIX, "", 1)
        return "%s/%s/%s/%s" % (
            constants.DASHBOARD_URL,
            org.slug,
            project.name,
            deployment_id,
        )

    def get_latest_deployment_url(self, client, project, team):
        proj = self.get_project(client, project, team)
        if proj is None or proj.latest_deployment is None:
            return None

        url = proj.latest_deployment.get("url")
        if url:
            return "https://%s" % url
        return None

    def get_latest_prod_deployment(self, client, project, team):
        proj = self.get_project(client, project, team)
        if proj is None or proj.production_deployment is None:
            return None

        url = proj.production_deployment.get("url")
        if url:
            return "https://%s" % url
        return None

    def get_project(self, client, project, team):
        # One lookup per invocation; every helper reads the same response.
        if not hasattr(self, "_project_cache"):
            self._project_cache = {}

        key = (project.name, team.id if team else None)
        if key not in self._project_cache:
            self._project_cache[key] = self.fetch_project(client, project, team)
        return self._project_cache[key]

    def fetch_project(self, client, project, team):
        try:
            data = client.fetch(
                "/v9/projects/%s" % project.name,
                params={"teamId": team.id if team else None},
            )
        except (APIError, requests.RequestException) as e:
            logger.error("%s", e)
            return None

        return Project.from_api(data)

    def add_arguments(self, parser):
        parser.add_argument(
            "--yes",
            action="store_true",
            default=False,
            help="Skip the confirmation prompt when linking a project",
        )
