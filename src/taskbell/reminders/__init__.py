"""
Reminder subsystem.

Components:
- reminder_models.py: Reminder record + fire-time truncation helpers
- reminder_scheduler.py: in-process scheduler keyed by task id, polling delivery loop,
  background-thread runner
- notifiers.py: delivery ports (console, log)
"""
