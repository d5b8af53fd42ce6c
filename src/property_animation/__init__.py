"""
property-animation: property animation showcase for PyQt6.

One star, six triggers: rotate, translate, scale, fade, colorize and a
falling-star shower. Each trigger builds a timeline description that Qt's
animation framework plays on the GUI event loop.

Architecture:
- animation: timeline configs, the engine that plays them, evaluators,
  listener wrappers and shower planning
- theming: color scheme, palette and stylesheet generation
- widgets: the star item, its container field and the panel controller
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
