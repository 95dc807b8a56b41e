"""
patternbook
===========

Design pattern lessons in a food-delivery and ride-hailing setting, plus
a toy video player.

Components:
    - principles: Polymorphism and SOLID warm-ups
    - creational: Factories, builder, prototype, injected app config
    - behavioral: Strategy, template method, observer, command, chain, iterator
    - video: Frame lookup and watch-progress tracking
    - runner: Command-line lesson runner (python -m patternbook)

Example:
    from patternbook.config import load_config
    from patternbook.runner import LESSONS

    LESSONS["observer"](load_config())
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
