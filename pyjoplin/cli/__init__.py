"""Command line interface for pyjoplin."""
