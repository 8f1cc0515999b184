"""Interactive 3D visualization of the Lorenz attractor."""
