"""Command-line layer (Typer application and runtime context)."""
