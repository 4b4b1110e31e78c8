"""
Task subsystem.

Components:
- task_models.py: the Task entity
- task_codec.py: one-line text encoding of a task
- task_file.py: flat-file persistence (load / append / rewrite)
- task_store.py: active + completed collections, id counter, completion listeners
- task_selection.py: interactive "pick a task by id" workflow
- errors.py: ValidationError / NotFoundError / StorageError
"""
