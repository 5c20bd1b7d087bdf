"""Application layer: services and use cases built on the domain."""
