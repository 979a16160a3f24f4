"""Company news articles."""
