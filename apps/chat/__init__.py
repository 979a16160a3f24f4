"""Chat rooms for employees."""
