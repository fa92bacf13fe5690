"""Core building blocks for reqrespy."""
