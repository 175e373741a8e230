from .console import Console
from .process import Process

__all__ = [
    "Console",
    "Process",
]
