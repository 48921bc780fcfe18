"""Optional content groups (layers) and their default configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from .util import Name


class VisibilityState(Enum):
    """Whether a layer starts out shown or hidden."""

    ON = "ON"
    OFF = "OFF"

    def __str__(self) -> str:
        return self.value


@dataclass
class UsageEntry:
    state: VisibilityState


@dataclass
class UsageDict:
    """Per-use visibility states of a layer."""

    print: UsageEntry | None = None
    view: UsageEntry | None = None
    export: UsageEntry | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.print is not None:
            result["Print"] = {"PrintState": Name(self.print.state.value)}
        if self.view is not None:
            result["View"] = {"ViewState": Name(self.view.state.value)}
        if self.export is not None:
            result["Export"] = {"ExportState": Name(self.export.state.value)}
        return result


@dataclass
class OptionalContentGroup:
    """A layer that can be shown or hidden as a whole."""

    name: str
    intent: list[str] | None = None
    initial_state: VisibilityState = VisibilityState.ON
    usage: UsageDict | None = None

    def with_state(self, state: VisibilityState) -> "OptionalContentGroup":
        self.initial_state = state
        return self

    def with_intent(self, intent: list[str]) -> "OptionalContentGroup":
        self.intent = list(intent)
        return self

    def _usage(self) -> UsageDict:
        if self.usage is None:
            self.usage = UsageDict()
        return self.usage

    def with_print_state(self, state: VisibilityState) -> "OptionalContentGroup":
        self._usage().print = UsageEntry(state)
        return self

    def with_view_state(self, state: VisibilityState) -> "OptionalContentGroup":
        self._usage().view = UsageEntry(state)
        return self

    def to_dict(self) -> dict[str, Any]:
        """The OCG dictionary."""
        result: dict[str, Any] = {"Type": Name("OCG"), "Name": self.name}
        if self.intent is not None:
            if len(self.intent) == 1:
                result["Intent"] = Name(self.intent[0])
            else:
                result["Intent"] = [Name(item) for item in self.intent]
        if self.usage is not None:
            result["Usage"] = self.usage.to_dict()
        return result


@dataclass
class LayerSingle:
    """One layer in the displayed order, by object number."""

    ocg_id: int


@dataclass
class LayerGroup:
    """A labelled group of layers in the displayed order."""

    label: str
    children: list["LayerOrder"] = field(default_factory=list)


LayerOrder = Union[LayerSingle, LayerGroup]


def _order_array(orders: list[LayerOrder]) -> list[Any]:
    result: list[Any] = []
    for order in orders:
        if isinstance(order, LayerSingle):
            result.append(order.ocg_id)
        else:
            result.append(order.label)
            result.append(_order_array(order.children))
    return result


@dataclass
class OptionalContentConfig:
    """The default visibility and ordering of layers."""

    name: str
    creator: str | None = None
    base_state: VisibilityState = VisibilityState.ON
    on_list: list[int] = field(default_factory=list)
    off_list: list[int] = field(default_factory=list)
    order: list[LayerOrder] = field(default_factory=list)

    def with_base_state(self, state: VisibilityState) -> "OptionalContentConfig":
        self.base_state = state
        return self

    def add_on(self, ocg_id: int) -> "OptionalContentConfig":
        self.on_list.append(ocg_id)
        return self

    def add_off(self, ocg_id: int) -> "OptionalContentConfig":
        self.off_list.append(ocg_id)
        return self

    def add_to_order(self, layer: LayerOrder) -> "OptionalContentConfig":
        self.order.append(layer)
        return self

    def to_dict(self) -> dict[str, Any]:
        """The configuration dictionary; layers are referred to by object number."""
        result: dict[str, Any] = {"Name": self.name}
        if self.creator is not None:
            result["Creator"] = self.creator
        result["BaseState"] = Name(self.base_state.value)
        if self.on_list:
            result["ON"] = list(self.on_list)
        if self.off_list:
            result["OFF"] = list(self.off_list)
        if self.order:
            result["Order"] = _order_array(self.order)
        return result