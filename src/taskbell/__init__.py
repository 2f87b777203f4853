"""taskbell: personal task tracker core with local reminders."""

__version__ = "0.1.0"
