class VercelctlError(Exception):
    code = None

    def __str__(self):
        super_str = super(VercelctlError, self).__str__()
        if not super_str:
            return str(self.__class__.__name__)

        return super_str


class UsageError(VercelctlError):
    pass


class NotAuthorized(VercelctlError):
    code = "NOT_AUTHORIZED"


class TeamDeleted(VercelctlError):
    code = "TEAM_DELETED"


class ProjectNotLinked(VercelctlError):
    pass


class APIError(VercelctlError):
    def __init__(self, *args, **kwargs):
        self._status = kwargs.pop("status", None)
        self._code = kwargs.pop("code", None)
        self._url = kwargs.pop("url", None)

        super(APIError, self).__init__(*args, **kwargs)

    @property
    def status(self):
        return self._status

    @property
    def code(self):
        return self._code

    @property
    def url(self):
        return self._url
