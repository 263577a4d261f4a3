"""API package for the Forex Alert Feed."""
