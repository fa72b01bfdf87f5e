"""
Task subsystem.

Components:
- task_models.py: data structures (StoredTask, DomainTask)
- task_codec.py: JSON encode/decode with wire field names
- task_repository.py: key-value backed CRUD + listing report
- task_mapper.py: stored <-> domain conversion
"""
