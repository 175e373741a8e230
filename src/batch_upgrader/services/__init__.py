from .executor import run_batch
from .package_manager import PackageManager
from .parser import TableParser, parse_upgrade_table

__all__ = [
    "PackageManager",
    "TableParser",
    "parse_upgrade_table",
    "run_batch",
]
