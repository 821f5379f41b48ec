"""
Fishbowl Aquarium Simulation

A deterministic, headless 2D tank simulator. Fish swim, steer away from
the glass and from each other, eat food, and carry a health meter.

Architecture: the simulation loop owns the world. Renderers and input
devices are consumers/producers at the edges.
"""

__version__ = "0.1.0"
