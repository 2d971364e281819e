"""
Secure API filters: whitelisted, type-checked query filters for Django models.
"""

__version__ = "0.1.0"
