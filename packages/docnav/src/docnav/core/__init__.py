"""Core menu resolution and tree traversal."""
