"""Services: orchestration flows reused by the CLI and tests."""
