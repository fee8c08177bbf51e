"""Feature modules for neo-service-registry."""
