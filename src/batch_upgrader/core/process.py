# core/process.py
import subprocess, platform
from .colors import CYAN, GRAY, RESET

def _win_creation():
    if platform.system() != "Windows":
        return {}
    flags = 0x08000000  # CREATE_NO_WINDOW
    return {"creationflags": flags}

def format_cmd(cmd) -> str:
    return " ".join(map(str, cmd))

class Process:
    """
    Blocking subprocess helpers. Every call waits for the child to exit.
    OSError from a missing executable propagates to the caller.
    """
    def __init__(self, debug: bool=False, dry_run: bool=False):
        self.debug = debug
        self.dry_run = dry_run
        self._win_kwargs = _win_creation()

    def _dbg(self, cmd):
        if self.debug:
            print(f"{CYAN}>>> {format_cmd(cmd)}{RESET}")

    def run_capture(self, cmd: list[str]) -> tuple[int,str]:
        self._dbg(cmd)
        r = subprocess.run(
            cmd, capture_output=True, text=True,
            encoding="utf-8", errors="replace",
            shell=False, **self._win_kwargs
        )
        return r.returncode, r.stdout or ""

    def run_stream(self, cmd: list[str]) -> int:
        self._dbg(cmd)
        if self.dry_run:
            print(f"{GRAY}[dry-run]{RESET} {format_cmd(cmd)}")
            return 0
        p = subprocess.Popen(
            cmd, stdout=subprocess.PIPE, stderr=subprocess.STDOUT,
            text=True, encoding="utf-8", errors="replace",
            shell=False, **self._win_kwargs
        )
        try:
            assert p.stdout is not None
            for line in p.stdout:
                s = (line or "").rstrip("\r\n")
                if s.strip():
                    print(s)
            return p.wait()
        except KeyboardInterrupt:
            p.terminate()
            p.wait()
            raise
