"""Lighting configuration model."""
