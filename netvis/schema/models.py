"""Pydantic models for nodes, edges and YAML graph documents."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..options.edge_options import EdgeOption
from ..options.node_options import NodeOption

# Ids are compared for equality only; the range mirrors a u128.
MAX_ID = 2**128

NODE_OPTION_KEYS = {"shape": "shape", "title": "title", "color": "color", "hex": "color"}


def check_id(value: int) -> int:
    """Raise ValueError unless ``value`` is an unsigned 128-bit integer."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"id must be an integer, got {value!r}")
    if not 0 <= value < MAX_ID:
        raise ValueError(f"id {value} is outside the range [0, 2**128)")
    return value


def _channels(key: str, value: Any, names: tuple[str, ...]) -> dict:
    """Spread a list of channel values into named fields."""
    if not isinstance(value, (list, tuple)) or len(value) != len(names):
        raise ValueError(f"'{key}' expects {len(names)} values, got {value!r}")
    return dict(zip(names, value))


def normalize_node_option(option: Any) -> Any:
    """Expand single-key shorthand (``{shape: box}``) into a tagged option."""
    if not isinstance(option, dict) or "kind" in option or len(option) != 1:
        return option

    ((key, value),) = option.items()
    kind = NODE_OPTION_KEYS.get(key)
    if kind is None:
        return option
    return {"kind": kind, kind: value}


def normalize_edge_option(option: Any) -> Any:
    """Expand single-key shorthand (``{hex: "#ff0000"}``) into a tagged option."""
    if not isinstance(option, dict) or "kind" in option or len(option) != 1:
        return option

    ((key, value),) = option.items()

    if key == "hex":
        return {"kind": "color", "color": {"kind": "hex", "hex": value}}
    if key == "rgb":
        return {"kind": "color", "color": {"kind": "rgb", **_channels(key, value, ("r", "g", "b"))}}
    if key == "rgba":
        return {
            "kind": "color",
            "color": {"kind": "rgba", **_channels(key, value, ("r", "g", "b", "a"))},
        }
    if key in ("name", "color"):
        # color: [r, g, b] and color: [r, g, b, a] are accepted as well
        if isinstance(value, (list, tuple)):
            if len(value) == 4:
                return normalize_edge_option({"rgba": value})
            return normalize_edge_option({"rgb": value})
        return {"kind": "name", "name": value}
    if key == "inherit":
        return {"kind": "inherit", "inherit": value}
    if key == "opacity":
        return {"kind": "opacity", "opacity": value}
    if key == "highlight":
        if isinstance(value, (list, tuple)):
            if len(value) == 4:
                return {"kind": "highlight_alpha", **_channels(key, value, ("r", "g", "b", "a"))}
            return {"kind": "highlight", **_channels(key, value, ("r", "g", "b"))}
        return {"kind": "highlight_name", "name": value}

    return option


class Node(BaseModel):
    """A graph vertex.

    ``style`` of None means "use the default swatch"; an empty tuple renders
    no style fragments at all.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    label: str
    style: tuple[NodeOption, ...] | None = None

    @field_validator("id", mode="before")
    @classmethod
    def validate_id(cls, value: Any) -> int:
        return check_id(value)

    @model_validator(mode="before")
    @classmethod
    def normalize_node(cls, data: Any) -> Any:
        """Default the label to the id, stringify scalar labels and expand style shorthand."""
        if not isinstance(data, dict):
            return data

        data = dict(data)
        label = data.get("label")
        if label is None and "id" in data:
            data["label"] = str(data["id"])
        elif isinstance(label, (bool, int, float)):
            # YAML reads `label: 2024` as an int
            data["label"] = str(label)

        style = data.get("style")
        if isinstance(style, (list, tuple)):
            data["style"] = [normalize_node_option(opt) for opt in style]

        return data


class Edge(BaseModel):
    """A connection between two node ids.

    Endpoints are not required to name declared nodes.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    source: int = Field(alias="from")
    target: int = Field(alias="to")
    style: tuple[EdgeOption, ...] | None = None
    directed: bool = False

    @field_validator("source", "target", mode="before")
    @classmethod
    def validate_endpoint(cls, value: Any) -> int:
        return check_id(value)

    @model_validator(mode="before")
    @classmethod
    def normalize_edge(cls, data: Any) -> Any:
        """Expand style shorthand."""
        if not isinstance(data, dict):
            return data

        style = data.get("style")
        if isinstance(style, (list, tuple)):
            data = dict(data)
            data["style"] = [normalize_edge_option(opt) for opt in style]

        return data

    @property
    def key(self) -> tuple[int, int]:
        """The ordered ``(source, target)`` pair used for deduplication."""
        return (self.source, self.target)


class GraphDocument(BaseModel):
    """Root model for a YAML graph file."""

    nodes: list[Node] = Field(default_factory=list)
    edges: list[Edge] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def normalize_document(cls, data: Any) -> Any:
        """Treat ``nodes: null`` / ``edges: null`` as empty lists."""
        if not isinstance(data, dict):
            return data

        data = dict(data)
        for key in ("nodes", "edges"):
            if data.get(key) is None:
                data[key] = []
        return data
