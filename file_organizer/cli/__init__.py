"""Command line interface for file-organizer."""
