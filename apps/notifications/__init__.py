"""In-app notifications and critical alerts."""
