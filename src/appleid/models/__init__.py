"""Models for Apple ID tokens, keys, and verification requests."""
