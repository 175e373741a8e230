import shutil
from pathlib import PureWindowsPath
from typing import List
from ..core.process import Process
from ..domain.candidate import UpgradeCandidate
from ..domain.errors import ToolUnavailable, UpgradeInvocationError
from .parser import TableParser

UPGRADE_FLAGS = ["--exact", "--accept-source-agreements", "--accept-package-agreements"]

class PackageManager:
    def __init__(self, proc: Process, exe: str = "winget", parser=None):
        self.proc = proc
        self.exe = exe
        self.parser = parser or TableParser(self.hint_prefix)

    @property
    def hint_prefix(self) -> str:
        # PureWindowsPath accepts both separators
        base = PureWindowsPath(self.exe).stem
        return f"{base} "

    def check_available(self) -> str:
        if shutil.which(self.exe) is None:
            raise ToolUnavailable(self.exe, "not found on PATH")
        try:
            rc, out = self.proc.run_capture([self.exe, "--version"])
        except OSError as e:
            raise ToolUnavailable(self.exe, str(e)) from e
        if rc != 0:
            raise ToolUnavailable(self.exe, f"version check exited with code {rc}")
        for line in out.splitlines():
            if line.strip():
                return line.strip()
        return ""

    def list_upgrades_text(self) -> str:
        # winget exits non-zero when nothing is upgradeable; the table decides
        _, out = self.proc.run_capture([self.exe, "upgrade"])
        return out

    def parse_upgrades(self, text: str) -> List[UpgradeCandidate]:
        return self.parser.parse(text)

    def upgrade(self, pkg_id: str) -> None:
        cmd = [self.exe, "upgrade", "--id", pkg_id] + UPGRADE_FLAGS
        try:
            rc = self.proc.run_stream(cmd)
        except OSError as e:
            raise UpgradeInvocationError(pkg_id, None, str(e)) from e
        if rc != 0:
            raise UpgradeInvocationError(pkg_id, rc, f"{self.exe} exited with code {rc}")
