"""Bundled configuration and policy constants for assetregistry."""
