"""CLI commands for schemagen."""
