"""Server configuration, constants and database wiring."""
