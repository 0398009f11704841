"""
Cat Safe: plant toxicity analysis for cats.
"""

__version__ = "0.1.0"
