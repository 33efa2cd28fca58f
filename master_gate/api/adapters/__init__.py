"""Adapters between API models and domain objects."""
