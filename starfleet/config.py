"""Validated settings for placing the board on screen and for the inspector CLI."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .layout import MapLayout


class BoardViewSettings(BaseModel):
    """Window geometry the board is fitted into."""

    model_config = ConfigDict(extra="forbid")

    window_height: float = Field(default=820.0, gt=0.0, allow_inf_nan=False)
    menu_height: float = Field(default=20.0, ge=0.0, allow_inf_nan=False)
    origin_x: float = Field(default=0.0, ge=0.0, allow_inf_nan=False)

    @model_validator(mode="after")
    def _menu_fits_window(self) -> BoardViewSettings:
        if self.menu_height >= self.window_height:
            raise ValueError("menu_height must be smaller than window_height")
        return self

    @property
    def map_height(self) -> float:
        """Vertical space left for the board below the menu bar."""

        return self.window_height - self.menu_height

    def layout(self) -> MapLayout:
        return MapLayout.fit(self.map_height, origin=(self.origin_x, self.menu_height))


class InspectorSettings(BaseModel):
    """Defaults used by ``python -m starfleet``."""

    model_config = ConfigDict(extra="forbid")

    edge: float = Field(default=60.0, gt=0.0, allow_inf_nan=False)
    view: BoardViewSettings = Field(default_factory=BoardViewSettings)


__all__ = ["BoardViewSettings", "InspectorSettings"]
