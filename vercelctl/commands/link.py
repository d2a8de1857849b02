from vercelctl.link import ensure_link, get_link_path
from vercelctl.paths import validate_paths
from vercelctl.plugin import CommandResult, DirectOutputCommandPlugin


class Command(DirectOutputCommandPlugin):
    """Link the current directory to an existing project"""

    MIN_VERSION = "1.0.0"
    MAX_VERSION = "2.0.0"

    def main(self, args, client, path, **kwargs):
        validation = validate_paths(client, [path])
        if not validation.valid:
            return CommandResult(return_code=validation.exit_code)

        linked_project = ensure_link(
            self.entrypoint_name, client, validation.path, args.yes
        )
        if isinstance(linked_project, int):
            return CommandResult(return_code=linked_project)

        return CommandResult(
            "{t.green}Linked to {t.bold}{org}/{project}{t.normal} "
            "{t.dim}({link_path}){t.normal}",
            org=linked_project.org.slug,
            project=linked_project.project.name,
            link_path=get_link_path(validation.path),
        )

    def add_arguments(self, parser):
        parser.add_argument(
            "--yes",
            action="store_true",
            default=False,
            help="Skip questions when setting up the link",
        )
