"""
Unified schema system for UI descriptors.

This module provides the data models and the component vocabulary shared by
the composition engine and the HTTP layer.
"""

from .core import (
    Mode,
    LayoutType,
    ThemeTokens,
    ComponentNode,
    NavItem,
    NavigationState,
    Metadata,
    ScreenDescriptor,
    Context,
    REQUIRED_FONT_ROLES,
    REQUIRED_SPACING_SCALES,
    CANONICAL_ROUTES,
    HOME_ROUTE,
)

from .product import (
    Product,
    ProductCard,
)

from .component_catalog import (
    COMPONENT_DEFINITIONS,
    get_available_components,
    get_component_definition,
    normalize_component_type,
    is_known_component,
    is_container_component,
    export_component_catalog,
)

__all__ = [
    # Core types
    'Mode',
    'LayoutType',
    'ThemeTokens',
    'ComponentNode',
    'NavItem',
    'NavigationState',
    'Metadata',
    'ScreenDescriptor',
    'Context',
    'REQUIRED_FONT_ROLES',
    'REQUIRED_SPACING_SCALES',
    'CANONICAL_ROUTES',
    'HOME_ROUTE',

    # Products
    'Product',
    'ProductCard',

    # Component vocabulary
    'COMPONENT_DEFINITIONS',
    'get_available_components',
    'get_component_definition',
    'normalize_component_type',
    'is_known_component',
    'is_container_component',
    'export_component_catalog',
]
