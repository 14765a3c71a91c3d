"""
Services - client code built on the pattern abstractions.
"""

from .kitchen_service import KitchenService

__all__ = ['KitchenService']
