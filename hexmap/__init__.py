"""Multi-resolution H3 hexagon overlay for interactive maps."""
