"""Exception definitions for mirror-deploy API"""

from typing import List, Optional

from ..constants import ErrorCode
from ..utils.url_utils import mask_argv


class MirrorDeployError(Exception):
    """Base exception for mirror-deploy"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.error_code = error_code


class ConfigError(MirrorDeployError):
    """Configuration error"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.CONFIG_ERROR)


class CommandError(MirrorDeployError):
    """A command exited with a non-zero status or could not be started"""

    def __init__(self,
                 argv: List[str],
                 returncode: Optional[int] = None,
                 stdout: str = "",
                 stderr: str = "",
                 message: str = None):
        self.argv = list(argv)
        self.returncode = returncode
        self.stdout = stdout or ""
        self.stderr = stderr or ""

        if message is None:
            message = f"Command failed with exit status {returncode}: {' '.join(mask_argv(self.argv))}"
            if self.stderr.strip():
                message += f"\n{self.stderr.strip()}"
        super().__init__(message, ErrorCode.COMMAND_FAILED)


class UnreachableRemoteError(MirrorDeployError):
    """Remote repository could not be listed"""

    def __init__(self, url: str, reason: str = ""):
        message = f"Repository is not reachable: {url}"
        if reason:
            message += f"\n{reason}"
        super().__init__(message, ErrorCode.REMOTE_UNREACHABLE)
        self.url = url


class MirrorSyncError(MirrorDeployError):
    """Clone or update of the mirror failed"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.MIRROR_SYNC_FAILED)


class UnresolvableReferenceError(MirrorDeployError):
    """Reference is neither a branch nor a tag/commit in the mirror"""

    def __init__(self, reference: str, reason: str = ""):
        message = f"Unable to resolve reference '{reference}'"
        if reason:
            message += f": {reason}"
        super().__init__(message, ErrorCode.REFERENCE_UNRESOLVABLE)
        self.reference = reference


class ExportError(MirrorDeployError):
    """Release tree could not be produced"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.EXPORT_FAILED)
