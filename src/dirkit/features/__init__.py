"""Feature packages built on the platform layer."""
