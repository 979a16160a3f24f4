"""Account administration for department heads and above."""
