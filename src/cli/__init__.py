"""Typer/Rich command line interface."""
