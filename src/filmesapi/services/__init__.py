"""Request orchestration: validation, mapping, data access and commit."""
