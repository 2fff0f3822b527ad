"""Infrastructure layer - concrete services registered in the container."""
