"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Priority, Category)
- task_codec.py: snapshot wire format (JSON)
- task_store.py: ordered in-memory collection + persistence/reminder wiring
- labels.py: display labels for priorities and categories
"""
