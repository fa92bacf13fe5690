"""Command line interface for reqrespy."""
