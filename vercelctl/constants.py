from vercelctl import __version__ as version

# Remote endpoints
API_URL = "https://api.vercel.com"
DASHBOARD_URL = "https://vercel.com"
USER_AGENT = "vercelctl %s" % version
REQUEST_TIMEOUT = 30

# Generic settings
GLOBAL_CONFIG = ".vercelctl_config"
LINK_DIR = ".vercel"
LINK_FILE = "project.json"
LINK_README = "README.txt"
TOKEN_ENVIRONMENT_VARIABLE = "VERCEL_TOKEN"

# Config sections
CONFIG_AUTH = "auth"
CONFIG_MAIN = "main"

# Value carried by a menu choice whose URL could not be resolved
NOT_FOUND = "not_found"

DEPLOYMENT_ID_PREFIX = "dpl_"
TEAM_ID_PREFIX = "team_"

ALLOW_USER_INPUT = True


from environmental_override import override  # noqa

override(locals(), "VERCELCTL_")
