"""Use cases composed from release validation and the CI adapters."""
