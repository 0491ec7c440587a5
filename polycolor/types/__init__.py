from .color_types import (
    Representation,
    ComponentKind,
    ComponentSpec,
    REPRESENTATIONS,
    COMPONENT_OWNERS,
    component_names,
    is_representation_name,
    to_representation,
)
from .protocols import (
    StyleOwner,
    PointLike,
    MatrixLike,
    GradientLike,
    DrawingSurface,
    PaintStyle,
)

__all__ = [
    "Representation",
    "ComponentKind",
    "ComponentSpec",
    "REPRESENTATIONS",
    "COMPONENT_OWNERS",
    "component_names",
    "is_representation_name",
    "to_representation",
    "StyleOwner",
    "PointLike",
    "MatrixLike",
    "GradientLike",
    "DrawingSurface",
    "PaintStyle",
]
