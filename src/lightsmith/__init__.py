"""LightSmith: studio lighting setups to text-to-image prompts."""

__version__ = "0.1.0"
