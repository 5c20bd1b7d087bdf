"""Infrastructure implementations of the domain services."""
