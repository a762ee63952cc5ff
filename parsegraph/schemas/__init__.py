"""Packaged JSON schemas for parsegraph input files."""
