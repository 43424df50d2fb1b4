"""HTTP service exposing the fractal jigsaw generator."""
