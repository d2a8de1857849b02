import mock

from vercelctl import __version__
from vercelctl.commands.version import Command

from .base import BaseCommandTestCase


class TestVersionCommand(BaseCommandTestCase):
    def test_version(self):
        client_factory = mock.Mock()

        result = Command.execute_command(
            [], client=client_factory, path=self.path, command_name="version"
        )

        self.assertEqual(result.return_code, 0)
        self.assertIn(__version__, result)
        self.assertIn("vercelctl", result)
        self.assertFalse(client_factory.called)
