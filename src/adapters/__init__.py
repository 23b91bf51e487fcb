"""Adapters: concrete implementations for external processes (subprocess, Docker)."""
