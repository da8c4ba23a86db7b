"""User interfaces built on top of the postmark core."""
