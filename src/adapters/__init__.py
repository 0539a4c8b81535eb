"""Adapters: concrete implementations of the core interfaces (subprocess, platform detectors)."""
