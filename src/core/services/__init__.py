"""Core services: output parsing and detection orchestration."""
