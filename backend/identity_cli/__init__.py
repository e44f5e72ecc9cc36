"""Typer command line client for the identity API."""
