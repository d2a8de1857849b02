import logging
from urllib import parse

import requests

from . import constants
from .exceptions import APIError, NotAuthorized


logger = logging.getLogger(__name__)


class Client(object):
    """Thin wrapper around the Vercel REST API.

    Holds the bearer token and the currently-selected team; commands
    mutate ``current_team`` once a project's owner is known so that
    subsequent requests are issued on behalf of that team.
    """

    def __init__(self, token=None, api_url=None, current_team=None, session=None):
        self.token = token
        self.api_url = (api_url or constants.API_URL).rstrip("/")
        self.current_team = current_team
        self.session = session or requests.Session()
        self.session.headers["User-Agent"] = constants.USER_AGENT

    def get_url(self, path):
        return parse.urljoin(self.api_url + "/", path.lstrip("/"))

    def fetch(self, path, params=None):
        if not self.token:
            raise NotAuthorized(
                "No authentication token was found.  Set one with "
                "`vercelctl config --global --set auth.token <token>` "
                "or the %s environment variable."
                % constants.TOKEN_ENVIRONMENT_VARIABLE
            )

        # An explicit teamId, even None, overrides the current team
        params = dict(params or {})
        if self.current_team and "teamId" not in params:
            params["teamId"] = self.current_team
        params = {k: v for k, v in params.items() if v is not None}

        url = self.get_url(path)
        logger.debug("GET %s %s", url, params or "")
        response = self.session.get(
            url,
            params=params or None,
            headers={"Authorization": "Bearer %s" % self.token},
            timeout=constants.REQUEST_TIMEOUT,
        )
        if not response.ok:
            raise self.get_error(response)

        return response.json()

    def get_error(self, response):
        code = None
        message = None
        try:
            error = response.json().get("error") or {}
            code = error.get("code")
            message = error.get("message")
        except (ValueError, AttributeError):
            pass

        if not message:
            message = "Request to %s failed with status %s" % (
                response.url,
                response.status_code,
            )

        return APIError(
            message, status=response.status_code, code=code, url=response.url,
        )
