"""Company events and RSVPs."""
