"""Prompt synthesis."""
