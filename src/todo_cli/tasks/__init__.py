"""
Task subsystem.

Components:
- task_models.py: the Task record and its JSON shape
- task_store.py: JSON file storage (read whole list / save whole list)
- reminders.py: reminder text -> stored timestamp, and local display
- task_scheduler.py: one event-loop timer per future reminder
"""
