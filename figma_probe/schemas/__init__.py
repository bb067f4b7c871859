"""Pydantic schemas for Figma API response models."""

from typing import Optional, List, Dict, Any, Union, Literal, Annotated
from pydantic import BaseModel, Field


# ============= Node Schemas =============

class FigmaNode(BaseModel):
    """One element of a design document tree.

    Only ``id``, ``name`` and ``type`` are required. Every other key the API
    sends (fills, strokes, boundVariables, ...) is kept as an extra field.
    """

    id: str
    name: str
    type: str
    children: List["FigmaNode"] = []

    class Config:
        extra = "allow"

    @property
    def extra_fields(self) -> Dict[str, Any]:
        """Keys not covered by the declared fields."""
        return dict(self.model_extra or {})


class FileSummary(BaseModel):
    """Top-level metadata of a Figma file."""

    name: str
    lastModified: Optional[str] = None
    version: Optional[str] = None


# ============= Comment Schemas =============

class FigmaUser(BaseModel):
    """Author of a comment."""

    id: str
    handle: str
    img_url: Optional[str] = None


class NodeOffset(BaseModel):
    x: float
    y: float


class FrameOffset(BaseModel):
    """Comment pinned to a position inside a node."""

    node_id: str
    node_offset: NodeOffset


class Region(BaseModel):
    """Comment pinned to a canvas region."""

    x: float
    y: float
    region_height: float
    comment_pin_corner: str


class Vector(BaseModel):
    """Comment pinned to a single canvas point."""

    x: float
    y: float


# Region first: a region payload also satisfies Vector
ClientMeta = Union[FrameOffset, Region, Vector]


class FigmaComment(BaseModel):
    """Schema for a file comment."""

    id: str
    uuid: Optional[str] = None
    file_key: str
    parent_id: Optional[str] = None
    user: FigmaUser
    created_at: str
    resolved_at: Optional[str] = None
    message: str
    client_meta: Optional[ClientMeta] = None
    order_id: Optional[str] = None


class CommentsResponse(BaseModel):
    """Schema for the comments endpoint response."""

    comments: List[FigmaComment] = []


# ============= Variable Schemas =============

ResolvedType = Literal["BOOLEAN", "FLOAT", "STRING", "COLOR"]


class BooleanValue(BaseModel):
    kind: Literal["BOOLEAN"] = "BOOLEAN"
    value: bool


class FloatValue(BaseModel):
    kind: Literal["FLOAT"] = "FLOAT"
    value: float


class StringValue(BaseModel):
    kind: Literal["STRING"] = "STRING"
    value: str


class ColorValue(BaseModel):
    kind: Literal["COLOR"] = "COLOR"
    r: float
    g: float
    b: float
    a: float = 1.0


class AliasValue(BaseModel):
    """Reference to another variable."""

    kind: Literal["VARIABLE_ALIAS"] = "VARIABLE_ALIAS"
    id: str


VariableValue = Annotated[
    Union[BooleanValue, FloatValue, StringValue, ColorValue, AliasValue],
    Field(discriminator="kind"),
]


def parse_variable_value(raw: Any, resolved_type: str) -> VariableValue:
    """Convert a raw ``valuesByMode`` entry into its tagged variant.

    Aliases are recognised by shape regardless of ``resolved_type``.
    """
    if isinstance(raw, dict) and raw.get("type") == "VARIABLE_ALIAS":
        return AliasValue(id=raw["id"])
    if resolved_type == "BOOLEAN":
        return BooleanValue(value=raw)
    if resolved_type == "FLOAT":
        return FloatValue(value=raw)
    if resolved_type == "STRING":
        return StringValue(value=raw)
    if resolved_type == "COLOR":
        return ColorValue(**raw)
    raise ValueError(f"Unsupported resolvedType: {resolved_type!r}")


class Variable(BaseModel):
    """Schema for a local variable."""

    id: str
    name: str
    key: str
    variableCollectionId: str
    resolvedType: ResolvedType
    valuesByMode: Dict[str, Any] = {}
    remote: Optional[bool] = None
    description: Optional[str] = None
    hiddenFromPublishing: Optional[bool] = None
    scopes: Optional[List[str]] = None

    def typed_values(self) -> Dict[str, VariableValue]:
        """Return values keyed by mode id as tagged variants."""
        return {
            mode_id: parse_variable_value(raw, self.resolvedType)
            for mode_id, raw in self.valuesByMode.items()
        }


class Mode(BaseModel):
    modeId: str
    name: str


class VariableCollection(BaseModel):
    """Schema for a variable collection."""

    id: str
    name: str
    modes: List[Mode] = []
    defaultModeId: str
    remote: Optional[bool] = None
    hiddenFromPublishing: Optional[bool] = None
    variableIds: List[str] = []


class VariablesMeta(BaseModel):
    variables: Dict[str, Variable] = {}
    variableCollections: Dict[str, VariableCollection] = {}


class VariablesResponse(BaseModel):
    """Schema for the local variables endpoint response."""

    status: int
    error: bool
    meta: VariablesMeta


# Forward reference resolution
FigmaNode.model_rebuild()
