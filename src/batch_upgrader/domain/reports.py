import json, time
from pathlib import Path

class BatchResult:
    def __init__(self):
        self.started = time.time()
        self.finished = None
        self.succeeded = []
        self.failed = []

    @property
    def success_count(self) -> int:
        return len(self.succeeded)

    @property
    def fail_count(self) -> int:
        return len(self.failed)

    @property
    def attempted(self) -> int:
        return self.success_count + self.fail_count

    def record_success(self, pkg_id: str):
        self.succeeded.append(pkg_id)

    def record_failure(self, pkg_id: str):
        self.failed.append(pkg_id)

    def mark_finished(self):
        if not self.finished:
            self.finished = time.time()

    def to_dict(self):
        return {
            "started": self.started,
            "finished": self.finished,
            "success_count": self.success_count,
            "fail_count": self.fail_count,
            "succeeded": self.succeeded,
            "failed": self.failed,
        }

    def save(self, fmt: str, path: Path):
        path.parent.mkdir(parents=True, exist_ok=True)
        if fmt == "json":
            path.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")
            return
        lines = ["Batch Upgrader Report", ""]
        lines.append(f"Succeeded: {self.success_count}")
        lines.append(f"Failed: {self.fail_count}")
        if self.succeeded: lines.append("Updated: " + ", ".join(self.succeeded))
        if self.failed: lines.append("Failed ids: " + ", ".join(self.failed))
        path.write_text("\n".join(lines), encoding="utf-8")
