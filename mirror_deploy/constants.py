"""Global constants for mirror-deploy"""

from enum import Enum

APP_NAME = "mirror-deploy"
LOG_FORMAT = "%(message)s"

# Git related
GIT_PROGRAM = "git"
RSYNC_PROGRAM = "rsync"
REMOTE_NAME = "origin"
GIT_METADATA_DIR = ".git"
GIT_EXCLUDE_PATTERN = ".git*"
GIT_ASKPASS = "/bin/echo"

# Default configuration values
DEFAULT_BRANCH = "master"
DEFAULT_TMP_DIR = "/tmp"
DEFAULT_EXPORT_STRATEGY = "rsync"
DEFAULT_CONFIG_FILE = "mirror-deploy.yaml"
CONFIG_SECTION = "scm"

# SSH wrapper script naming
WRAPPER_NAME_PATTERN = "git-ssh-{application}-{stage}-{local_user}.sh"

SECRET_MASK = "********"
SHORT_REVISION_LENGTH = 7


class ExportStrategyType(Enum):
    RSYNC = "rsync"
    RSYNC_LINKS = "rsync-links"
    ARCHIVE = "archive"


# Error codes
class ErrorCode:
    CONFIG_ERROR = "MD001"
    COMMAND_FAILED = "MD002"
    REMOTE_UNREACHABLE = "MD003"
    MIRROR_SYNC_FAILED = "MD004"
    REFERENCE_UNRESOLVABLE = "MD005"
    EXPORT_FAILED = "MD006"


# Environment variables
ENV_CONFIG_PATH = "MIRROR_DEPLOY_CONFIG"
ENV_LOG_LEVEL = "MIRROR_DEPLOY_LOG_LEVEL"
ENV_PREFIX = "MIRROR_DEPLOY_"

# Config keys that may be overridden from MIRROR_DEPLOY_<KEY> variables
ENV_OVERRIDE_KEYS = [
    "repo_url",
    "git_http_username",
    "git_http_password",
    "repo_path",
    "branch",
    "release_path",
    "repo_tree",
    "export_strategy",
    "tmp_dir",
    "application",
    "stage",
    "local_user",
    "ssh_wrapper_path",
]

# Display constants
EMOJI_SUCCESS = "✓"
EMOJI_ERROR = "✗"
EMOJI_ARROW = "→"

# Messages templates
MSG_MIRROR_CLONED = f"{EMOJI_SUCCESS} Mirror cloned: {{path}}"
MSG_MIRROR_UPDATED = f"{EMOJI_SUCCESS} Mirror updated: {{path}} {EMOJI_ARROW} {{tracking}}"
MSG_RELEASE_CREATED = f"{EMOJI_SUCCESS} Release created: {{path}}"
MSG_REMOTE_REACHABLE = f"{EMOJI_SUCCESS} Remote reachable: {{url}}"
