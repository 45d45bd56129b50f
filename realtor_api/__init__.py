"""
Realtor listing service.
Data-access layer for home listings and their images.
"""

__version__ = "1.0.0"
