"""Department directory."""
