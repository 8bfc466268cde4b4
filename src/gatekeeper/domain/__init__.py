"""Domain layer - entities and services independent of the HTTP surface."""
