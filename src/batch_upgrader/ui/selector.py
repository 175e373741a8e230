from typing import List
from ..core.colors import *
from ..core.console import Console
from ..domain.candidate import UpgradeCandidate

YES, STOP = "y", "a"

class Selector:
    def __init__(self, console: Console, input_fn=input):
        self.console = console
        self.input_fn = input_fn

    def _answer(self, prompt: str, on_eof: str) -> str:
        try:
            return self.console.ask(prompt, self.input_fn).strip().lower()
        except EOFError:
            print()
            return on_eof

    def print_candidate(self, i: int, total: int, c: UpgradeCandidate):
        w = len(str(total))
        print(f"{SUN}{str(i).rjust(w)}/{total}{RESET}  {WHITE}{BOLD}{c.name}{RESET}")
        print(f"{' ' * (w * 2 + 3)}{GRAY}Id:{RESET} {c.id}  {GRAY}Installed:{RESET} {c.current_version}  {GRAY}Available:{RESET} {c.available_version}")

    def select(self, candidates: List[UpgradeCandidate]) -> List[str]:
        """
        Ask about each candidate in order. 'y' selects, 'a' skips this one and
        every remaining one without asking, anything else skips.
        """
        self.console.header(f"Upgradable Apps ({len(candidates)})")
        ids: List[str] = []
        total = len(candidates)
        for i, c in enumerate(candidates, 1):
            self.print_candidate(i, total, c)
            ans = self._answer("Upgrade? [Y]es / [N]o / [A] No to all →", on_eof=STOP)
            if ans == STOP:
                if total > i:
                    self.console.info(f"Skipping the remaining {total - i} app(s).")
                break
            if ans == YES:
                c.selected = True
                ids.append(c.id)
        return ids

    def confirm(self, selected: List[UpgradeCandidate]) -> bool:
        self.console.header("Selected for upgrade")
        for c in selected:
            print(f"  {WHITE}{c.name}{RESET}: {c.current_version} {GRAY}->{RESET} {GREEN}{c.available_version}{RESET}")
        print()
        return self._answer(f"Upgrade these {len(selected)} app(s)? (Y/N) →", on_eof="n") == YES
