from typing import Optional


class UpdaterError(Exception):
    pass


class ToolUnavailable(UpdaterError):
    """The package manager could not be found or did not answer the version check."""

    def __init__(self, exe: str, detail: str = ""):
        self.exe = exe
        self.detail = detail
        msg = f"Package manager '{exe}' is not available"
        super().__init__(f"{msg}: {detail}" if detail else msg)


class UpgradeInvocationError(UpdaterError):
    """A single package upgrade failed. `returncode` is None when the process never started."""

    def __init__(self, pkg_id: str, returncode: Optional[int], detail: str):
        self.pkg_id = pkg_id
        self.returncode = returncode
        self.detail = detail
        super().__init__(f"{pkg_id}: {detail}")
