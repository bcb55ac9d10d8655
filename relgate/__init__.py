"""Release gate: validate a release event against the manifest version."""

__version__ = "0.1.0"
