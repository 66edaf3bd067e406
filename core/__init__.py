"""Time and geometry primitives shared by the solver and the preview."""
