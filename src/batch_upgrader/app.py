from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .core.colors import GRAY, RESET
from .core.console import Console
from .domain.candidate import UpgradeCandidate, find_candidate
from .domain.reports import BatchResult
from .services.executor import run_batch
from .ui.selector import Selector
from .ui.summary import print_canceled, print_no_updates, print_nothing_selected, print_summary


class FlowState(Enum):
    CHECKING_TOOL = "checking_tool"
    LISTING = "listing"
    PARSING = "parsing"
    SELECTING = "selecting"
    CONFIRMING = "confirming"
    EXECUTING = "executing"
    REPORTING = "reporting"
    CANCELED = "canceled"
    NO_UPDATES = "no_updates"
    NOTHING_SELECTED = "nothing_selected"


@dataclass
class FlowOutcome:
    state: FlowState
    candidates: List[UpgradeCandidate] = field(default_factory=list)
    selected: List[str] = field(default_factory=list)
    result: Optional[BatchResult] = None


def _enter(console: Console, state: FlowState) -> None:
    if console.debug:
        print(f"{GRAY}[{state.value}]{RESET}")


def run_upgrade_flow(console: Console, manager, selector: Selector, assume_yes: bool = False) -> FlowOutcome:
    """
    Run one pass of check -> list -> select -> confirm -> upgrade -> report.

    ToolUnavailable from the availability check propagates; every other
    outcome, cancellation included, comes back as a terminal FlowOutcome.
    """
    _enter(console, FlowState.CHECKING_TOOL)
    version = manager.check_available()
    console.ok(f"Found {manager.exe} {version}".rstrip())

    _enter(console, FlowState.LISTING)
    console.info("Checking for available upgrades…")
    text = manager.list_upgrades_text()

    _enter(console, FlowState.PARSING)
    candidates = manager.parse_upgrades(text)
    if not candidates:
        print_no_updates(console)
        return FlowOutcome(FlowState.NO_UPDATES)

    _enter(console, FlowState.SELECTING)
    selected = selector.select(candidates)
    if not selected:
        print_nothing_selected(console)
        return FlowOutcome(FlowState.NOTHING_SELECTED, candidates)

    _enter(console, FlowState.CONFIRMING)
    chosen = [find_candidate(candidates, pkg_id) for pkg_id in selected]
    if assume_yes:
        console.info(f"--yes given; upgrading {len(chosen)} app(s) without confirmation.")
    elif not selector.confirm(chosen):
        print_canceled(console)
        return FlowOutcome(FlowState.CANCELED, candidates, selected)

    _enter(console, FlowState.EXECUTING)
    result = run_batch(selected, candidates, manager, console)

    _enter(console, FlowState.REPORTING)
    print_summary(console, result)
    return FlowOutcome(FlowState.REPORTING, candidates, selected, result)
