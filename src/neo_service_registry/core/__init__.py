"""Core building blocks shared across neo-service-registry features."""
