import os
import shutil
import tempfile

from vercelctl.types import LinkedProject, PathValidation, Scope, User

from ..base import BaseTestCase


class BaseCommandTestCase(BaseTestCase):
    def setUp(self):
        super(BaseCommandTestCase, self).setUp()
        self.root_folder = tempfile.mkdtemp()
        self.path = os.path.join(self.root_folder, "my-app")
        os.mkdir(self.path)

        self.user = User(
            id="usr_jdoe", username="jdoe", email="jdoe@example.com", name="Jane Doe"
        )
        self.project = self.get_project()
        self.org = self.get_team_org()

    def tearDown(self):
        shutil.rmtree(self.root_folder)

    def get_scope(self, team=None):
        return Scope(user=self.user, team=team)

    def get_path_validation(self):
        return PathValidation(valid=True, path=self.path, exit_code=0)

    def get_linked_project(self):
        return LinkedProject(project=self.project, org=self.org)
