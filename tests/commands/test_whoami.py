from mock import patch

from vercelctl.commands.whoami import Command
from vercelctl.exceptions import NotAuthorized

from .base import BaseCommandTestCase


class TestWhoamiCommand(BaseCommandTestCase):
    def run_command(self, *extra_args):
        return Command.execute_command(
            list(extra_args),
            client=lambda: self.get_mock_client(),
            path=self.path,
            command_name="whoami",
        )

    def test_personal(self):
        with patch("vercelctl.commands.whoami.get_scope") as get_scope:
            get_scope.return_value = self.get_scope()
            result = self.run_command()

        self.assertEqual(result.return_code, 0)
        self.assertIn("jdoe", result)
        self.assertNotIn("team:", result)

    def test_with_team(self):
        with patch("vercelctl.commands.whoami.get_scope") as get_scope:
            get_scope.return_value = self.get_scope(self.get_team())
            result = self.run_command()

        self.assertIn("team: acme", result)

    def test_not_authorized(self):
        with patch("vercelctl.commands.whoami.get_scope") as get_scope:
            get_scope.side_effect = NotAuthorized("The token is invalid.")
            result = self.run_command()

        self.assertEqual(result.return_code, 1)
        self.assertIn("The token is invalid.", result)
