"""Infrastructure layer: persistence for IAM entities."""
