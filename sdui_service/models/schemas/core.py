"""
Core type definitions for UI descriptors.
"""
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Mode(str, Enum):
    """Presentation mode derived from the local clock"""
    LATE_NIGHT = "late_night"
    MORNING = "morning"
    DAY = "day"
    FLASH_SALE = "flash_sale"
    AFTERNOON = "afternoon"
    EVENING = "evening"
    NIGHT = "night"


class LayoutType(str, Enum):
    """Top-level layout hint for the renderer"""
    SCROLL = "scroll"
    GRID = "grid"


REQUIRED_FONT_ROLES = ("headline", "title", "body", "caption")
REQUIRED_SPACING_SCALES = ("xs", "sm", "md", "lg", "xl")

HOME_ROUTE = "/"
CANONICAL_ROUTES = ("/", "/search", "/cart", "/favorites", "/profile")


class ThemeTokens(BaseModel):
    """Visual tokens for one presentation mode"""
    model_config = ConfigDict(frozen=True)

    is_dark_mode: bool
    primary_color: str
    background_color: str
    accent_color: str
    font_sizes: Dict[str, float]
    border_radius: float
    spacing: Dict[str, float]

    @field_validator('font_sizes')
    @classmethod
    def validate_font_roles(cls, v: Dict[str, float]) -> Dict[str, float]:
        """Every palette carries the full type scale"""
        missing = [role for role in REQUIRED_FONT_ROLES if role not in v]
        if missing:
            raise ValueError(f"Missing font size roles: {missing}")
        return v

    @field_validator('spacing')
    @classmethod
    def validate_spacing_scales(cls, v: Dict[str, float]) -> Dict[str, float]:
        """Every palette carries the full spacing scale"""
        missing = [scale for scale in REQUIRED_SPACING_SCALES if scale not in v]
        if missing:
            raise ValueError(f"Missing spacing scales: {missing}")
        return v


class ComponentNode(BaseModel):
    """One typed, styled node of the component tree"""
    model_config = ConfigDict(frozen=True)

    id: str
    type: str
    props: Dict[str, Any] = Field(default_factory=dict)
    style: Dict[str, Any] = Field(default_factory=dict)
    children: Optional[List["ComponentNode"]] = None
    action: Optional[Dict[str, Any]] = None

    def walk(self) -> Iterator["ComponentNode"]:
        """Yield this node and its descendants depth-first"""
        yield self
        for child in self.children or []:
            yield from child.walk()


class NavItem(BaseModel):
    """Bottom navigation entry"""
    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    icon: str
    route: str
    is_active: bool = False


class NavigationState(BaseModel):
    """Navigation chrome for one screen"""
    model_config = ConfigDict(frozen=True)

    bottom_nav: List[NavItem]
    top_actions: List[Dict[str, Any]] = Field(default_factory=list)
    show_back_button: bool
    title: str

    @field_validator('bottom_nav')
    @classmethod
    def validate_canonical_routes(cls, v: List[NavItem]) -> List[NavItem]:
        """Only the five canonical tabs may appear"""
        for item in v:
            if item.route not in CANONICAL_ROUTES:
                raise ValueError(f"Non-canonical navigation route: {item.route}")
        return v

    @property
    def active_item(self) -> Optional[NavItem]:
        return next((item for item in self.bottom_nav if item.is_active), None)


class Metadata(BaseModel):
    """Descriptor provenance"""
    model_config = ConfigDict(frozen=True)

    mode: Mode
    timestamp: str
    server_time: str
    version: str
    generated_by: str


class ScreenDescriptor(BaseModel):
    """Complete, self-contained UI specification for one screen"""
    model_config = ConfigDict(frozen=True)

    screen_id: str
    layout_type: LayoutType
    theme: ThemeTokens
    components: List[ComponentNode]
    navigation: NavigationState
    metadata: Metadata

    @model_validator(mode='after')
    def validate_unique_ids(self) -> 'ScreenDescriptor':
        """Ensure all component IDs are unique across the tree"""
        ids = self.component_ids()
        if len(ids) != len(set(ids)):
            duplicates = {node_id for node_id in ids if ids.count(node_id) > 1}
            raise ValueError(f"Duplicate component IDs found: {duplicates}")
        return self

    def component_ids(self) -> List[str]:
        return [node.id for component in self.components for node in component.walk()]

    def to_wire(self) -> Dict[str, Any]:
        """JSON-ready payload (absent children/actions are omitted)"""
        return self.model_dump(mode="json", exclude_none=True)

    def to_json(self) -> str:
        return self.model_dump_json(exclude_none=True)


class Context(BaseModel):
    """Everything the engine knows about one UI request"""
    model_config = ConfigDict(frozen=True)

    route: str = HOME_ROUTE
    screen_params: Dict[str, str] = Field(default_factory=dict)
    user_id: Optional[str] = None
    now: datetime
