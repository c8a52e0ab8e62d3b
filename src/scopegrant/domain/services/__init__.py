"""Domain services for scopegrant.

Services contain logic that doesn't naturally fit within a single entity:
public id generation and scope resolution.
"""
