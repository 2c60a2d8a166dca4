"""
Models package.

Exports:
- schemas: All descriptor and product data models
"""

from .schemas import (
    Mode,
    LayoutType,
    ThemeTokens,
    ComponentNode,
    NavItem,
    NavigationState,
    Metadata,
    ScreenDescriptor,
    Context,
    Product,
    ProductCard,
)

__all__ = [
    'Mode',
    'LayoutType',
    'ThemeTokens',
    'ComponentNode',
    'NavItem',
    'NavigationState',
    'Metadata',
    'ScreenDescriptor',
    'Context',
    'Product',
    'ProductCard',
]
