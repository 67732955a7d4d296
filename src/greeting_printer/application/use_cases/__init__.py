"""Use cases orchestrating domain objects through ports."""
