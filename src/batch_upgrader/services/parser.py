import re
from typing import List
from ..domain.candidate import UpgradeCandidate, UNKNOWN_VERSION

SEPARATOR_RE = re.compile(r"^-{2,}")
COLUMN_SPLIT_RE = re.compile(r"\s{2,}")

def parse_upgrade_table(text: str, hint_prefix: str = "winget ") -> List[UpgradeCandidate]:
    """
    Parse the tabular output of `<manager> upgrade`.

    Everything up to a dashed separator is header noise. After it, a row
    must start with an alphanumeric character and is split on runs of two
    or more whitespace characters, so single spaces inside names survive.
    A blank line ends the current table; winget can print a second table
    with its own header, which is skipped until its separator.
    Rows with fewer than three columns are dropped without complaint.
    """
    hint = (hint_prefix or "").lower()
    rows: List[UpgradeCandidate] = []
    in_table = False
    for line in (text or "").splitlines():
        if not in_table:
            if SEPARATOR_RE.match(line):
                in_table = True
            continue
        if not line.strip():
            in_table = False
            continue
        if not line[:1].isalnum():
            continue
        if hint and line.lower().startswith(hint):
            continue
        cols = [c for c in COLUMN_SPLIT_RE.split(line.strip()) if c]
        if len(cols) < 3:
            continue
        rows.append(UpgradeCandidate(
            name=cols[0],
            id=cols[1],
            current_version=cols[2],
            available_version=cols[3] if len(cols) > 3 else UNKNOWN_VERSION,
        ))
    return rows

class TableParser:
    """Listing parser for the human-readable table format."""

    def __init__(self, hint_prefix: str = "winget "):
        self.hint_prefix = hint_prefix

    def parse(self, text: str) -> List[UpgradeCandidate]:
        return parse_upgrade_table(text, self.hint_prefix)
