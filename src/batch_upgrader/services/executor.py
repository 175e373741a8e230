from typing import List, Sequence
from ..core.console import Console
from ..domain.candidate import UpgradeCandidate, find_candidate
from ..domain.errors import UpgradeInvocationError
from ..domain.reports import BatchResult

def run_batch(ids: Sequence[str], candidates: List[UpgradeCandidate], manager, console: Console) -> BatchResult:
    """Upgrade each id in turn. One failure never stops the rest of the batch."""
    result = BatchResult()
    total = len(ids)
    for i, pkg_id in enumerate(ids, 1):
        c = find_candidate(candidates, pkg_id)
        console.info(f"[{i}/{total}] Upgrading {c.label() if c else pkg_id}")
        try:
            manager.upgrade(pkg_id)
        except UpgradeInvocationError as e:
            console.err(f"Failed to upgrade {pkg_id}: {e.detail}")
            result.record_failure(pkg_id)
            continue
        console.ok(f"Upgraded {pkg_id}")
        result.record_success(pkg_id)
    result.mark_finished()
    return result
