from ..core.colors import *
from ..core.console import Console
from ..domain.reports import BatchResult

def print_summary(console: Console, r: BatchResult):
    console.header("Summary")
    print(f"{GREEN}Succeeded:{RESET} {r.success_count}")
    print(f"{RED}Failed:{RESET} {r.fail_count}")
    if r.succeeded:
        print(f"{GREEN}Updated:{RESET} " + ", ".join(r.succeeded))
    if r.failed:
        print(f"{RED}Failed ids:{RESET} " + ", ".join(r.failed))
    if r.fail_count:
        console.warn(f"Upgrade finished with {r.fail_count} failure(s).")
    else:
        console.ok("All selected apps upgraded.")

def print_no_updates(console: Console):
    console.ok("No updates available.")

def print_nothing_selected(console: Console):
    console.info("No apps selected for upgrade.")

def print_canceled(console: Console):
    console.warn("Upgrade canceled.")
