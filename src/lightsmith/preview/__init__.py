"""Preview geometry."""
