"""Core building blocks shared across memu-client."""
