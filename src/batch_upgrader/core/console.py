import os, ctypes, sys, io
from datetime import datetime
from .colors import *
from ..data.paths import LOG_DIR

class _Tee(io.TextIOBase):
    def __init__(self, a, b): self.a, self.b = a, b
    def write(self, s): self.a.write(s); self.b.write(s); return len(s)
    def flush(self): self.a.flush(); self.b.flush()

class Console:
    def __init__(self, debug: bool=False, dry_run: bool=False):
        self.debug = debug
        self.dry_run = dry_run
        self.log_path = None
        self._log_fp = None
        self._streams = None

    def enable_windows_ansi_utf8(self):
        if os.name != "nt":
            return
        try:
            k32 = ctypes.windll.kernel32
            hOut = k32.GetStdHandle(-11)
            mode = ctypes.c_uint32()
            if k32.GetConsoleMode(hOut, ctypes.byref(mode)):
                k32.SetConsoleMode(hOut, mode.value | 0x0004)
            k32.SetConsoleOutputCP(65001)
            k32.SetConsoleCP(65001)
        except (AttributeError, OSError):
            pass

    def start_log(self, log_dir=None):
        """
        Mirror stdout/stderr into a timestamped run log. Failing to create the
        log never blocks the run; the console keeps working without it.
        """
        log_dir = log_dir or LOG_DIR
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            self.log_path = log_dir / f"run-{datetime.now().strftime('%Y%m%d-%H%M%S')}.log"
            self._log_fp = open(self.log_path, "w", encoding="utf-8", errors="replace")
        except OSError as e:
            self.log_path = None
            self.warn(f"Run log disabled: {e}")
            return None
        self._streams = (sys.stdout, sys.stderr)
        sys.stdout = _Tee(sys.stdout, self._log_fp)
        sys.stderr = _Tee(sys.stderr, self._log_fp)
        return self.log_path

    def close(self):
        if self._streams:
            sys.stdout, sys.stderr = self._streams
            self._streams = None
        if self._log_fp:
            self._log_fp.close()
            self._log_fp = None

    def header(self, title: str):
        print(f"{ORANGE}{BOLD}{'='*80}{RESET}")
        print(f"{ORANGE}{BOLD}{title}{RESET}")
        print(f"{ORANGE}{BOLD}{'='*80}{RESET}")

    def info(self, msg): print(f"{CYAN}→ {msg}{RESET}")
    def ok(self, msg):   print(f"{GREEN}✔ {msg}{RESET}")
    def warn(self, msg): print(f"{YELLOW}⚠ {msg}{RESET}")
    def err(self, msg):  print(f"{RED}{BOLD}✘ {msg}{RESET}")

    def ask(self, prompt: str, input_fn=input) -> str:
        return input_fn(f"{ORANGE}{BOLD}{prompt}{RESET} ")

    def banner(self, version: str = ""):
        ver = f" {GRAY}v{version}{RESET}" if version else ""
        print(f"\n{SUN}{BOLD}Batch Upgrader{RESET}{ver}  {GRAY}— list • pick • upgrade{RESET}")
        if self.dry_run:
            print(f"{YELLOW}{BOLD}Dry run:{RESET} upgrade commands are printed, not executed")
        print()
