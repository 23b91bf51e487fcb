"""Core: configuration, domain, script discovery and the init pipeline."""
