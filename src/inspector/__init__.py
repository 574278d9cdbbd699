"""
Reference inspector host.

- object_resolver.py: FieldResolver over Python object graphs, YAML objects
- drawer.py: verdict-to-layout mapping and dataclass field walking
"""

from .object_resolver import (
    EnumValue,
    ObjectFieldResolver,
    load_object,
    parse_path,
)
from .drawer import (
    ConditionalFieldDrawer,
    DrawPlan,
    SHOW_IF_METADATA_KEY,
    conditional_field,
    rules_from_metadata,
)

__all__ = [
    "EnumValue",
    "ObjectFieldResolver",
    "load_object",
    "parse_path",
    "ConditionalFieldDrawer",
    "DrawPlan",
    "SHOW_IF_METADATA_KEY",
    "conditional_field",
    "rules_from_metadata",
]
