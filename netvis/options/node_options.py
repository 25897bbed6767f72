"""Style options for nodes."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class Shape(BaseModel):
    """vis-network shape name, e.g. ``dot``, ``box`` or ``hexagon``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["shape"] = "shape"
    shape: str

    def render(self) -> str:
        return f'shape: "{self.shape}",'


class NodeColor(BaseModel):
    """Node fill color as a hex string."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["color"] = "color"
    color: str

    def render(self) -> str:
        return f'color: "{self.color}",'


class Title(BaseModel):
    """Tooltip text shown when hovering the node."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["title"] = "title"
    title: str

    def render(self) -> str:
        return f'title: "{self.title}",'


NodeOption = Annotated[
    Union[Shape, NodeColor, Title],
    Field(discriminator="kind"),
]
