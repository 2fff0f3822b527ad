"""Domain layer - interfaces and errors shared by all layers."""
