import os
import shutil
import tempfile

import mock

from vercelctl.paths import validate_paths

from .base import BaseTestCase


class TestValidatePaths(BaseTestCase):
    def setUp(self):
        self.root_folder = tempfile.mkdtemp()
        self.client = mock.Mock()

    def tearDown(self):
        shutil.rmtree(self.root_folder)

    def test_valid_directory(self):
        result = validate_paths(self.client, [self.root_folder])

        self.assertTrue(result.valid)
        self.assertEqual(result.path, os.path.realpath(self.root_folder))

    def test_multiple_paths(self):
        result = validate_paths(self.client, [self.root_folder, self.root_folder])

        self.assertFalse(result.valid)
        self.assertEqual(result.exit_code, 1)

    def test_missing_path(self):
        result = validate_paths(
            self.client, [os.path.join(self.root_folder, "does-not-exist")]
        )

        self.assertFalse(result.valid)
        self.assertEqual(result.exit_code, 1)

    def test_file_path(self):
        file_path = os.path.join(self.root_folder, "file.txt")
        with open(file_path, "w") as out:
            out.write("hello")

        result = validate_paths(self.client, [file_path])

        self.assertFalse(result.valid)
        self.assertEqual(result.exit_code, 1)

    def test_home_directory_declined(self):
        with mock.patch("vercelctl.paths.os.path.expanduser") as expanduser:
            expanduser.return_value = self.root_folder
            with mock.patch("vercelctl.paths.prompt.confirm") as confirm:
                confirm.return_value = False
                result = validate_paths(self.client, [self.root_folder])

        self.assertTrue(confirm.called)
        self.assertFalse(result.valid)
        self.assertEqual(result.exit_code, 0)

    def test_home_directory_confirmed(self):
        with mock.patch("vercelctl.paths.os.path.expanduser") as expanduser:
            expanduser.return_value = self.root_folder
            with mock.patch("vercelctl.paths.prompt.confirm") as confirm:
                confirm.return_value = True
                result = validate_paths(self.client, [self.root_folder])

        self.assertTrue(result.valid)
