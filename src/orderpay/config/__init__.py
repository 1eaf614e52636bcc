"""Configuration – settings dataclasses, loaders and validation errors."""
