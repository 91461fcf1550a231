"""Customer appointment scheduling."""
