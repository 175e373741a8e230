from .selector import Selector
from .summary import print_summary, print_no_updates, print_nothing_selected, print_canceled

__all__ = [
    'Selector',
    'print_summary', 'print_no_updates', 'print_nothing_selected', 'print_canceled',
]
