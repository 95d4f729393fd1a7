"""
Utility functions module.

Clock and calendar helpers shared by the sequence timer, the routines and
the trackers.

Date Semantics:
- Tracker entries are keyed by local calendar date in ISO format (YYYY-MM-DD)
- Countdown values are whole seconds and rendered as m:ss
"""
