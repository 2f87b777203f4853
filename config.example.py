# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKBELL_APP_NAME": "App display name (default: taskbell).",
    "TASKBELL_LOG_LEVEL": "Console logging level (default: INFO).",
    # Front-end
    "TASKBELL_CONSOLE_ENABLED": "Run the console front-end (true/false, default: true).",
    "TASKBELL_REMINDERS_ENABLED": "Deliver reminders in a background thread (default: true).",
    "TASKBELL_LABEL_LOCALE": "Display labels for priority/category: en | tr (default: en).",
    # Paths (gitignored)
    "TASKBELL_DATA_DIR": "Local data directory (default: .local/taskbell).",
    "TASKBELL_TASKS_DB_PATH": "Snapshot SQLite path (default: <data_dir>/tasks.sqlite3).",
    "TASKBELL_STORAGE_KEY": "Blob key holding the task list (default: task_list).",
    # Reminders
    "TASKBELL_REMINDER_POLL_SECONDS": "Reminder loop poll interval (default: 15).",
    "TASKBELL_REMINDER_MAX_PENDING": "Max pending reminders before new ones are rejected (default: 64).",
}
