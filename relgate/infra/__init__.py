"""Adapters for the CI environment: event payload, manifest, step outputs."""
