"""Command line interface for cronhint."""
