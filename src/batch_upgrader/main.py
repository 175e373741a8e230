import argparse, sys
from pathlib import Path
from . import __version__
from .app import run_upgrade_flow
from .core.console import Console
from .core.process import Process
from .domain.errors import ToolUnavailable
from .services.package_manager import PackageManager
from .ui.selector import Selector

EXIT_TOOL_UNAVAILABLE = 1
EXIT_INTERRUPTED = 130

def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="batch-upgrader", description="Pick and upgrade outdated apps in one batch")
    p.add_argument("--exe", type=str, default="winget", help="package manager executable")
    p.add_argument("--yes", action="store_true", help="skip the final confirmation")
    p.add_argument("--report", choices=["json","txt"])
    p.add_argument("--out", type=str)
    p.add_argument("--no-log", action="store_true", help="do not write a run log")
    p.add_argument("--dry-run", action="store_true")
    p.add_argument("--debug", action="store_true")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p

def run_cli(argv=None, input_fn=input) -> int:
    args = _build_parser().parse_args(argv)
    if args.report and not args.out:
        args.out = f"batch-upgrade.{args.report}"

    console = Console(debug=args.debug, dry_run=args.dry_run)
    console.enable_windows_ansi_utf8()
    if not args.no_log:
        console.start_log()
    try:
        console.banner(__version__)
        proc = Process(debug=args.debug, dry_run=args.dry_run)
        manager = PackageManager(proc, exe=args.exe)
        selector = Selector(console, input_fn=input_fn)
        try:
            outcome = run_upgrade_flow(console, manager, selector, assume_yes=args.yes)
        except ToolUnavailable as e:
            console.err(str(e))
            console.info(f"Install {args.exe} or pass its path with --exe.")
            return EXIT_TOOL_UNAVAILABLE
        except KeyboardInterrupt:
            print()
            console.warn("Interrupted.")
            return EXIT_INTERRUPTED

        if outcome.result and args.report:
            out_path = Path(args.out).expanduser()
            try:
                outcome.result.save(args.report, out_path)
                console.ok(f"Report written: {out_path}")
            except OSError as e:
                console.warn(f"Could not write report: {e}")
        if console.log_path:
            console.info(f"Run log: {console.log_path}")
        return 0
    finally:
        console.close()

def run() -> int:
    return run_cli(sys.argv[1:])

def main():
    sys.exit(run())

if __name__ == "__main__":
    main()
