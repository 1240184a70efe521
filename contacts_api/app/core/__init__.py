"""Settings, logging and error handling shared by the whole application."""
