"""Color values shared by edge style options."""

import math
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

Channel = Annotated[int, Field(ge=0, le=255)]


def js_number(value: float) -> str:
    """Format a float as a JavaScript number literal (NaN, Infinity, 0.3)."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return str(value)


class HexColor(BaseModel):
    """A color given as a hex string such as ``#ff0000``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["hex"] = "hex"
    hex: str

    def render(self) -> str:
        return f'color: "{self.hex}",'


class RGBColor(BaseModel):
    """A color given as red, green and blue channels."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["rgb"] = "rgb"
    r: Channel
    g: Channel
    b: Channel

    def render(self) -> str:
        return f'color: "rgb({self.r}, {self.g}, {self.b}) ",'


class RGBAColor(BaseModel):
    """A color given as RGB channels plus an alpha value."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["rgba"] = "rgba"
    r: Channel
    g: Channel
    b: Channel
    a: float

    def render(self) -> str:
        return f'color: "rgba({self.r}, {self.g}, {self.b}, {js_number(self.a)})",'


Color = Annotated[
    Union[HexColor, RGBColor, RGBAColor],
    Field(discriminator="kind"),
]
