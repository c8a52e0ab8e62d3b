"""Domain layer for scopegrant: entities, services and exceptions."""
