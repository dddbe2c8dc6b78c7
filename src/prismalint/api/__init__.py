"""REST API for prismalint."""
