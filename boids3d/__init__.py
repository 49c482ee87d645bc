"""Three-dimensional boids flocking simulation: vector maths, neighbour lookup, flocking rules, spawning, an orbit camera model and a headless simulation loop."""

__version__ = "0.1.0"