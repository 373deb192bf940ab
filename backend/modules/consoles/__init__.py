"""
Consoles module.

The admin and worker dashboards. A console loads everything one role sees
for an explicit ConsoleState and drops loads overtaken by newer ones.

Public API:
- IConsole, AdminConsole, WorkerConsole, console_for
- ConsoleState, SlotFilter, ConsoleView
- RequestSequencer
"""

from .console import AdminConsole, BaseConsole, ConsoleView, IConsole, WorkerConsole, console_for
from .sequencer import RequestSequencer
from .state import ConsoleState, SlotFilter, default_filter, state_from_query

__all__ = [
    "AdminConsole",
    "BaseConsole",
    "ConsoleView",
    "IConsole",
    "WorkerConsole",
    "console_for",
    "RequestSequencer",
    "ConsoleState",
    "SlotFilter",
    "default_filter",
    "state_from_query",
]
