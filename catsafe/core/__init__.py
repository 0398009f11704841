"""
Core configuration and utilities for the Cat Safe system.
"""

from catsafe.core.deps import depends_plant_safety

__all__ = ["depends_plant_safety"]
