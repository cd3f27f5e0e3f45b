"""Chain-specific clients and service implementations."""
