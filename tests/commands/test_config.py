import configparser

from mock import patch

from vercelctl.commands.config import Command
from vercelctl.exceptions import UsageError

from .base import BaseCommandTestCase


class TestConfigCommand(BaseCommandTestCase):
    def setUp(self):
        super(TestConfigCommand, self).setUp()
        self.config = configparser.RawConfigParser()
        self.config.add_section("auth")
        self.config.set("auth", "token", "s3cret")
        self.config.add_section("main")
        self.config.set("main", "current_team", "team_acme")

        patcher = patch("vercelctl.commands.config.utils.get_config")
        self.get_config = patcher.start()
        self.get_config.return_value = self.config
        self.addCleanup(patcher.stop)

    def run_command(self, *extra_args):
        return Command.execute_command(
            list(extra_args), client=None, path=self.path, command_name="config"
        )

    def test_list_masks_token(self):
        result = self.run_command("--list")

        self.assertIn("main.current_team=team_acme", result)
        self.assertIn("auth.token=********", result)
        self.assertNotIn("s3cret", result)

    def test_list_is_default(self):
        result = self.run_command()

        self.assertIn("main.current_team=team_acme", result)

    def test_get(self):
        result = self.run_command("--get", "auth.token")

        self.assertEqual(result, "s3cret\n")

    def test_get_missing(self):
        result = self.run_command("--get", "main.missing")

        self.assertEqual(result.return_code, 1)

    def test_set(self):
        with patch(
            "vercelctl.commands.config.utils.set_global_config_value"
        ) as set_value:
            self.run_command("--set", "main.current_team", "team_other")

        set_value.assert_called_once_with("main", "current_team", "team_other")

    def test_set_requires_two_parameters(self):
        with self.assertRaises(UsageError):
            self.run_command("--set", "main.current_team")

    def test_key_requires_section(self):
        with self.assertRaises(UsageError):
            self.run_command("--get", "token")
