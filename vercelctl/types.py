import collections
from typing import Dict, List, Optional, Union


Deployment = Dict[str, Union[str, int, None]]
Choice = Dict[str, str]


User = collections.namedtuple("User", ["id", "username", "email", "name"])
Team = collections.namedtuple("Team", ["id", "slug", "name"])
Org = collections.namedtuple("Org", ["id", "slug", "type"])
Scope = collections.namedtuple("Scope", ["user", "team"])
LinkedProject = collections.namedtuple("LinkedProject", ["project", "org"])
ProjectLink = collections.namedtuple("ProjectLink", ["project_id", "org_id"])
PathValidation = collections.namedtuple(
    "PathValidation", ["valid", "path", "exit_code"]
)


class Project(
    collections.namedtuple(
        "Project", ["id", "name", "account_id", "latest_deployments", "targets"]
    )
):
    @classmethod
    def from_api(cls, data: Dict) -> "Project":
        return cls(
            id=data.get("id"),
            name=data.get("name"),
            account_id=data.get("accountId"),
            latest_deployments=data.get("latestDeployments") or [],
            targets=data.get("targets") or {},
        )

    @property
    def latest_deployment(self) -> Optional[Deployment]:
        deployments: List[Deployment] = self.latest_deployments
        if deployments:
            return deployments[0]
        return None

    @property
    def production_deployment(self) -> Optional[Deployment]:
        return self.targets.get("production")


def user_from_api(data: Dict) -> User:
    return User(
        id=data.get("id") or data.get("uid"),
        username=data.get("username"),
        email=data.get("email"),
        name=data.get("name"),
    )


def team_from_api(data: Dict) -> Team:
    return Team(id=data.get("id"), slug=data.get("slug"), name=data.get("name"))
