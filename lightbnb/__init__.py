"""
LightBnB data-access layer: user, reservation and property queries over async SQLAlchemy.
"""

__version__ = "1.0.0"
