"""
Component Registry Type Definitions
Typed descriptors for the closed catalog of page components.
"""

import copy
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ComponentCategory(str, Enum):
    """Palette groups"""
    LAYOUT = "layout"
    SECTIONS = "sections"
    CONTENT = "content"
    MEDIA = "media"
    WIDGETS = "widgets"
    COMMERCE = "commerce"
    FORMS = "forms"

    @property
    def label(self) -> str:
        return _CATEGORY_LABELS[self]


_CATEGORY_LABELS = {
    ComponentCategory.LAYOUT: "Layout",
    ComponentCategory.SECTIONS: "Sections",
    ComponentCategory.CONTENT: "Content",
    ComponentCategory.MEDIA: "Media",
    ComponentCategory.WIDGETS: "Widgets",
    ComponentCategory.COMMERCE: "E-Commerce",
    ComponentCategory.FORMS: "Forms",
}


class ComponentType(str, Enum):
    """Closed catalog of component types"""
    # Layout
    HEADER = "header"
    FOOTER = "footer"
    DIVIDER = "divider"
    SPACER = "spacer"
    CONTAINER = "container"
    COLUMNS = "columns"
    ROW_2 = "row-2"
    ROW_3 = "row-3"
    ROW_4 = "row-4"
    ROW_SIDEBAR = "row-sidebar"
    # Sections
    HERO = "hero"
    CTA = "cta"
    BANNER = "banner"
    ABOUT = "about"
    FEATURES = "features"
    SERVICES = "services"
    STATS = "stats"
    TIMELINE = "timeline"
    FAQ = "faq"
    TEAM = "team"
    TESTIMONIALS = "testimonials"
    CLIENTS = "clients"
    BLOG = "blog"
    PORTFOLIO = "portfolio"
    # Content
    TEXT = "text"
    HEADING = "heading"
    BUTTON = "button"
    LIST = "list"
    QUOTE = "quote"
    CODE = "code"
    # Media
    IMAGE = "image"
    GALLERY = "gallery"
    VIDEO = "video"
    SLIDER = "slider"
    MEDIATEXT = "mediatext"
    AUDIO = "audio"
    FILE = "file"
    ICONBOX = "iconbox"
    # Widgets
    SEARCH = "search"
    SOCIALICONS = "socialicons"
    CALENDAR = "calendar"
    ARCHIVES = "archives"
    CATEGORIES = "categories"
    LATESTPOSTS = "latestposts"
    CUSTOMHTML = "customhtml"
    WEATHER = "weather"
    # Commerce
    PRICING = "pricing"
    PRODUCTS = "products"
    PRODUCTCARD = "productcard"
    PRODUCTGRID = "productgrid"
    CARTBUTTON = "cartbutton"
    PRICEDISPLAY = "pricedisplay"
    SALEBADGE = "salebadge"
    COUNTDOWN = "countdown"
    # Forms
    CONTACT = "contact"
    NEWSLETTER = "newsletter"
    MAP = "map"
    LOGINFORM = "loginform"

    @classmethod
    def parse(cls, value: "str | ComponentType") -> "ComponentType | None":
        """Resolve a type name, or None if it is not in the catalog."""
        try:
            return cls(value)
        except ValueError:
            return None


class FieldKind(str, Enum):
    """Property panel input kinds"""
    TEXT = "text"
    TEXTAREA = "textarea"
    EMAIL = "email"
    PHONE = "phone"
    URL = "url"
    COLOR = "color"
    NUMBER = "number"
    BOOLEAN = "boolean"
    SELECT = "select"
    DATE = "date"
    DATETIME = "datetime"
    STRING_LIST = "string_list"
    OBJECT_LIST = "object_list"


_TRUE_STRINGS = {"true", "1", "yes", "on"}
_FALSE_STRINGS = {"false", "0", "no", "off"}


class FieldSpec(BaseModel):
    """Editable field on a component's data payload"""
    model_config = ConfigDict(frozen=True)

    name: str
    label: str
    kind: FieldKind = FieldKind.TEXT
    default: Any = Field(default=None, description="Fallback shown when the field is missing")
    options: tuple[Any, ...] = Field(default=(), description="Allowed values for select fields")
    item_fields: tuple["FieldSpec", ...] = Field(default=(), description="Keys of object-list items")
    item_default: Any = Field(default=None, description="Value appended by 'add item'")

    @property
    def is_list(self) -> bool:
        return self.kind in (FieldKind.STRING_LIST, FieldKind.OBJECT_LIST)

    def fallback(self) -> Any:
        """Fresh copy of the default value."""
        return copy.deepcopy(self.default)

    def new_item(self) -> Any:
        """Fresh copy of the value appended to a list field."""
        if self.item_default is not None:
            return copy.deepcopy(self.item_default)
        if self.kind == FieldKind.OBJECT_LIST:
            return {f.name: f.fallback() for f in self.item_fields}
        return ""

    def coerce(self, value: Any) -> Any:
        """
        Convert raw panel input to the value stored on the component.

        Raises:
            ValueError: If the value does not fit the field kind
        """
        if self.kind == FieldKind.NUMBER:
            return _coerce_number(self.name, value)
        if self.kind == FieldKind.BOOLEAN:
            return _coerce_bool(self.name, value)
        if self.kind == FieldKind.SELECT:
            return self._coerce_option(value)
        if self.kind == FieldKind.STRING_LIST:
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise ValueError(f"Field '{self.name}' expects a list of strings")
            return list(value)
        if self.kind == FieldKind.OBJECT_LIST:
            if not isinstance(value, list) or not all(isinstance(v, dict) for v in value):
                raise ValueError(f"Field '{self.name}' expects a list of objects")
            return [dict(v) for v in value]
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)

    def _coerce_option(self, value: Any) -> Any:
        if not self.options or value in self.options:
            return value
        # Numeric selects (column counts) arrive as strings from inputs
        if isinstance(value, str):
            try:
                number = _coerce_number(self.name, value)
            except ValueError:
                number = None
            if number is not None and number in self.options:
                return number
        raise ValueError(f"Field '{self.name}' must be one of {list(self.options)}, got {value!r}")


def _coerce_number(name: str, value: Any) -> int | float:
    if isinstance(value, bool):
        raise ValueError(f"Field '{name}' expects a number")
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            return float(text)
        except ValueError:
            pass
    raise ValueError(f"Field '{name}' expects a number, got {value!r}")


def _coerce_bool(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise ValueError(f"Field '{name}' expects a boolean, got {value!r}")


class ComponentDescriptor(BaseModel):
    """Catalog entry: defaults factory and field schema for one type"""
    model_config = ConfigDict(frozen=True)

    type: ComponentType
    label: str
    category: ComponentCategory
    defaults: dict[str, Any] = Field(default_factory=dict, description="Template for new components")
    fields: tuple[FieldSpec, ...] = Field(default_factory=tuple)
    in_palette: bool = Field(default=True, description="Offered in the component palette")

    def create_default(self) -> dict[str, Any]:
        """Fresh default data; never shares structure with the template."""
        return copy.deepcopy(self.defaults)

    def field(self, name: str) -> FieldSpec | None:
        for spec in self.fields:
            if spec.name == name:
                return spec
        return None


PALETTE_DRAG_PREFIX = "panel-"


class PaletteEntry(BaseModel):
    """Palette item shown in the component panel"""
    type: ComponentType
    label: str
    category: ComponentCategory

    @property
    def drag_id(self) -> str:
        return f"{PALETTE_DRAG_PREFIX}{self.type.value}"


FieldSpec.model_rebuild()
