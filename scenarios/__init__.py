"""Feature-file scenario harness for the tuple primitive."""
