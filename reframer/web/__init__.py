"""Web — Flask API for the reframe screen."""
