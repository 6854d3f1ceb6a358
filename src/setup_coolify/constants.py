"""Built-in defaults and API constants."""

# GitHub API URL structure
GITHUB_API_BASE = "https://api.github.com"
GITHUB_REPOS_PATH = "repos"
RELEASES_PATH = "releases"
LATEST_PATH = "latest"

# coolify-cli release repository
RELEASE_OWNER = "coollabsio"
RELEASE_REPO = "coolify-cli"
DOWNLOAD_BASE_URL = f"https://github.com/{RELEASE_OWNER}/{RELEASE_REPO}/releases/download"

# Reference project queried when "latest" is requested
LATEST_OWNER = "digitalocean"
LATEST_REPO = "doctl"

TOOL_NAME = "coolify"
ARTIFACT_NAME = "coolify-cli"
FALLBACK_VERSION = "1.4.0"
FALLBACK_URL = "https://app.coolify.io"
DEFAULT_CONTEXT = "actions-context"
RELEASE_COUNT = 5

LATEST = "latest"
