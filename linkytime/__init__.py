# ==============================================
# LinkyTime — Meeting Link Manager
# ==============================================
#
# Package Structure (4 Topics + Orchestrator):
#
# linkytime/
# ├── model/          # Topic 1: Field values, MeetingEntry, MeetingCollection
# ├── commands/       # Topic 2: One command object per user action
# ├── parser/         # Topic 3: Raw text -> validated command
# ├── persistence/    # Topic 4: Save/load the collection across restarts
# ├── exceptions.py   # Error taxonomy shared by every topic
# ├── config.py       # Configuration management
# ├── logic.py        # Session orchestrator (LogicManager)
# └── cli.py          # Command line entry point
#
# ==============================================

__version__ = "0.1.0"
