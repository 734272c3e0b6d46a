"""Session and reservation coordination core for the cinema booking client."""
