"""Packaged resources: the default project configuration."""
