from mock import patch

from vercelctl import constants
from vercelctl.prompt import confirm, list_prompt

from .base import BaseTestCase


class TestListPrompt(BaseTestCase):
    def setUp(self):
        self.choices = [
            {"name": "Dashboard", "value": "https://vercel.com/acme/my-app"},
            {
                "name": "Latest Preview Deployment",
                "value": constants.NOT_FOUND,
                "short": "Latest Preview Deployment",
            },
        ]

    def test_select_by_number(self):
        with patch("vercelctl.prompt.utils.get_user_input") as get_user_input:
            get_user_input.return_value = "1"
            result = list_prompt("What do you want to open?", self.choices)

        self.assertEqual(result, "https://vercel.com/acme/my-app")
        _, kwargs = get_user_input.call_args
        self.assertEqual(kwargs["options"], ["1", "2", "3"])

    def test_select_sentinel(self):
        with patch("vercelctl.prompt.utils.get_user_input") as get_user_input:
            get_user_input.return_value = "2"
            result = list_prompt("What do you want to open?", self.choices)

        self.assertEqual(result, constants.NOT_FOUND)

    def test_abort_choice(self):
        with patch("vercelctl.prompt.utils.get_user_input") as get_user_input:
            get_user_input.return_value = "3"
            result = list_prompt("What do you want to open?", self.choices)

        self.assertEqual(result, "")

    def test_interrupted(self):
        with patch("vercelctl.prompt.utils.get_user_input") as get_user_input:
            get_user_input.side_effect = KeyboardInterrupt
            result = list_prompt("What do you want to open?", self.choices)

        self.assertEqual(result, "")

    def test_without_abort(self):
        with patch("vercelctl.prompt.utils.get_user_input") as get_user_input:
            get_user_input.return_value = "2"
            list_prompt("What do you want to open?", self.choices, abort=False)

        _, kwargs = get_user_input.call_args
        self.assertEqual(kwargs["options"], ["1", "2"])

    def test_user_input_disabled(self):
        with patch.object(constants, "ALLOW_USER_INPUT", False):
            with self.assertRaises(RuntimeError):
                list_prompt("What do you want to open?", self.choices)


class TestConfirm(BaseTestCase):
    def test_confirm_yes(self):
        with patch("builtins.input") as input_:
            input_.return_value = "yes"
            self.assertTrue(confirm("Continue?"))

    def test_confirm_default(self):
        with patch("builtins.input") as input_:
            input_.return_value = ""
            self.assertTrue(confirm("Continue?", default=True))

    def test_confirm_eof(self):
        with patch("builtins.input") as input_:
            input_.side_effect = EOFError
            self.assertFalse(confirm("Continue?", default=True))
