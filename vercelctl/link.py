import io
import json
import logging
import os
import sys
import textwrap

from . import constants, prompt, scope, utils
from .exceptions import APIError, ProjectNotLinked, VercelctlError
from .types import LinkedProject, Org, Project, ProjectLink


logger = logging.getLogger(__name__)


LINK_README_CONTENTS = textwrap.dedent(
    """\
    > Why do I have a folder named ".vercel" in my project?
    The ".vercel" folder is created when you link a directory to a Vercel project.

    > What does the "project.json" file contain?
    The "project.json" file contains:
    - The ID of the Vercel project that you linked ("projectId")
    - The ID of the user or the team your Vercel project is owned by ("orgId")

    > Should I commit the ".vercel" folder?
    No, you should not share the ".vercel" folder with anyone.
    Upon creation, it will be automatically added to your ".gitignore" file.
    """
)


def get_link_path(path, filename=constants.LINK_FILE):
    return os.path.join(path, constants.LINK_DIR, filename)


def read_link(path):
    link_path = get_link_path(path)
    if not os.path.isfile(link_path):
        return None

    with io.open(link_path, "r", encoding="utf-8") as _in:
        try:
            data = json.loads(_in.read())
        except ValueError as e:
            raise VercelctlError("Could not parse %s: %s" % (link_path, e))

    try:
        return ProjectLink(project_id=data["projectId"], org_id=data["orgId"])
    except (KeyError, TypeError):
        raise VercelctlError(
            "%s is missing its \"projectId\" or \"orgId\" value; remove it and "
            "run `vercelctl link` again." % link_path
        )


def write_link(path, project_id, org_id):
    os.makedirs(os.path.join(path, constants.LINK_DIR), exist_ok=True)

    with io.open(get_link_path(path), "w", encoding="utf-8") as out:
        out.write(json.dumps({"projectId": project_id, "orgId": org_id}))
    with io.open(
        get_link_path(path, constants.LINK_README), "w", encoding="utf-8"
    ) as out:
        out.write(LINK_README_CONTENTS)

    add_to_gitignore(path)

    return ProjectLink(project_id=project_id, org_id=org_id)


def add_to_gitignore(path):
    gitignore_path = os.path.join(path, ".gitignore")
    entry = constants.LINK_DIR

    lines = []
    if os.path.isfile(gitignore_path):
        with io.open(gitignore_path, "r", encoding="utf-8") as _in:
            lines = _in.read().splitlines()
        if entry in lines or entry + "/" in lines:
            return False

    lines.append(entry)
    with io.open(gitignore_path, "w", encoding="utf-8") as out:
        out.write("\n".join(lines) + "\n")

    return True


def get_org_by_id(client, org_id):
    if org_id.startswith(constants.TEAM_ID_PREFIX):
        team = scope.get_team_by_id(client, org_id)
        return Org(id=team.id, slug=team.slug, type="team")

    user = scope.get_user(client)
    return Org(id=user.id, slug=user.username, type="user")


def get_project_by_id_or_name(client, id_or_name, org):
    params = {"teamId": org.id if org.type == "team" else None}

    try:
        data = client.fetch("/v9/projects/%s" % id_or_name, params=params)
    except APIError as e:
        if e.status == 404:
            return None
        raise

    return Project.from_api(data)


def get_linked_project(client, path):
    link = read_link(path)
    if link is None:
        return None

    org = get_org_by_id(client, link.org_id)
    project = get_project_by_id_or_name(client, link.project_id, org)
    if project is None:
        raise ProjectNotLinked(
            "The project linked in %s no longer exists." % get_link_path(path)
        )

    return LinkedProject(project=project, org=org)


def select_org(client, yes=False):
    if client.current_team:
        team = scope.get_team_by_id(client, client.current_team)
        return Org(id=team.id, slug=team.slug, type="team")

    user = scope.get_user(client)
    personal = Org(id=user.id, slug=user.username, type="user")
    if yes:
        return personal

    teams = scope.get_teams(client)
    if not teams:
        return personal

    orgs = {personal.id: personal}
    choices = [
        {
            "name": "%s (personal account)" % user.username,
            "value": user.id,
            "short": user.username,
        }
    ]
    for team in teams:
        orgs[team.id] = Org(id=team.id, slug=team.slug, type="team")
        choices.append(
            {"name": team.name or team.slug, "value": team.id, "short": team.slug}
        )

    value = prompt.list_prompt("Which scope should contain your project?", choices)
    return orgs.get(value)


def setup_and_link(command_name, client, path, yes=False):
    if not yes:
        if not sys.stdin.isatty():
            logger.error(
                "Command `vercelctl %s` requires confirmation. "
                "Use option --yes to confirm.",
                command_name,
            )
            return 1
        if not prompt.confirm('Set up "%s"?' % path, default=True):
            logger.info("Aborted")
            return 0

    org = select_org(client, yes)
    if org is None:
        logger.info("Aborted")
        return 0

    default_name = os.path.basename(path)
    if yes:
        name = default_name
    else:
        name = utils.get_user_input(
            "What's the name of your existing project? [%s]" % default_name,
            default=default_name,
        )

    project = get_project_by_id_or_name(client, name, org)
    if project is None:
        logger.error(
            'Project "%s" was not found under %s.  Create it in the dashboard '
            "first, then run `vercelctl %s` again.",
            name,
            org.slug,
            command_name,
        )
        return 1

    write_link(path, project.id, org.id)
    logger.info(
        "Linked %s to %s/%s (created %s)",
        path,
        org.slug,
        project.name,
        os.path.join(constants.LINK_DIR, constants.LINK_FILE),
    )

    return LinkedProject(project=project, org=org)


def ensure_link(command_name, client, path, yes=False):
    """Return the project linked to ``path``, linking one if needed.

    Returns a :class:`LinkedProject` or an integer exit code when the
    user aborts or linking fails.
    """
    try:
        linked = get_linked_project(client, path)
    except ProjectNotLinked as e:
        logger.warning("%s", e)
        linked = None

    if linked is not None:
        return linked

    return setup_and_link(command_name, client, path, yes)
