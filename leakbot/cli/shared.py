"""Shared utilities for leakbot CLI commands."""

from rich.console import Console

console = Console()
