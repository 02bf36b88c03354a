"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskId)
- errors.py: validation / lookup failures raised by the store
- task_store.py: in-memory store owning the ordered tasks and the pending input text
"""
