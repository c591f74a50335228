"""Pydantic models for a site page and its canvas layout."""

from __future__ import annotations

from typing import Any, ClassVar, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

TEXT_WEB_PART = "#microsoft.graph.textWebPart"
STANDARD_WEB_PART = "#microsoft.graph.standardWebPart"


def _none_as_empty(value: Any) -> Any:
    return [] if value is None else value


class WebPart(BaseModel):
    """A content block on a page canvas.

    Properties declared on the model form the typed backing store; every
    other property Graph returns is kept as additional data.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    backing_fields: ClassVar[tuple[str, ...]] = ()

    id: str | None = None
    odata_type: str | None = Field(default=None, alias="@odata.type")

    def backing_store(self) -> dict[str, Any]:
        """Typed properties that are set, keyed by their Graph name."""
        store: dict[str, Any] = {}
        for name in self.backing_fields:
            value = getattr(self, name)
            if value is not None:
                store[type(self).model_fields[name].alias or name] = value
        return store

    @property
    def additional_data(self) -> dict[str, Any]:
        """Properties not covered by the typed model."""
        return dict(self.model_extra or {})


class TextWebPart(WebPart):
    """Rich text web part."""

    backing_fields: ClassVar[tuple[str, ...]] = ("inner_html",)

    inner_html: str | None = Field(default=None, alias="innerHtml")


class StandardWebPart(WebPart):
    """Any other web part (images, embeds, lists, ...)."""

    backing_fields: ClassVar[tuple[str, ...]] = ("web_part_type",)

    web_part_type: str | None = Field(default=None, alias="webPartType")


_WEB_PART_TYPES: dict[str, type[WebPart]] = {
    TEXT_WEB_PART: TextWebPart,
    STANDARD_WEB_PART: StandardWebPart,
}


def parse_web_part(raw: Any) -> WebPart:
    """Build the web part model matching the payload's ``@odata.type``.

    Args:
        raw: A web part as returned by Graph, or an existing model

    Returns:
        A WebPart (or subclass) instance
    """
    if isinstance(raw, WebPart):
        return raw
    model = _WEB_PART_TYPES.get(raw.get("@odata.type", ""), WebPart)
    return model.model_validate(raw)


def _parse_web_parts(value: Any) -> Any:
    if value is None:
        return []
    # Null or malformed entries contribute nothing
    return [parse_web_part(item) for item in value if isinstance(item, (Mapping, WebPart))]


class HorizontalSectionColumn(BaseModel):
    """A column of a horizontal section."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str | None = None
    width: int | None = None
    webparts: list[WebPart] = Field(default_factory=list)

    @field_validator("webparts", mode="before")
    @classmethod
    def parse_webparts(cls, value: Any) -> Any:
        return _parse_web_parts(value)


class HorizontalSection(BaseModel):
    """A multi-column row of the canvas."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str | None = None
    layout: str | None = None
    emphasis: str | None = None
    columns: list[HorizontalSectionColumn] = Field(default_factory=list)

    @field_validator("columns", mode="before")
    @classmethod
    def empty_columns(cls, value: Any) -> Any:
        return _none_as_empty(value)


class VerticalSection(BaseModel):
    """The single-column side section of the canvas."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    emphasis: str | None = None
    webparts: list[WebPart] = Field(default_factory=list)

    @field_validator("webparts", mode="before")
    @classmethod
    def parse_webparts(cls, value: Any) -> Any:
        return _parse_web_parts(value)


class CanvasLayout(BaseModel):
    """Layout tree of a modern site page."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    horizontal_sections: list[HorizontalSection] = Field(
        default_factory=list, alias="horizontalSections"
    )
    vertical_section: VerticalSection | None = Field(default=None, alias="verticalSection")

    @field_validator("horizontal_sections", mode="before")
    @classmethod
    def empty_sections(cls, value: Any) -> Any:
        return _none_as_empty(value)


class SitePage(BaseModel):
    """A site page fetched with its canvas layout expanded."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str | None = None
    title: str | None = None
    description: str | None = None
    web_url: str | None = Field(default=None, alias="webUrl")
    page_layout: str | None = Field(default=None, alias="pageLayout")
    canvas_layout: CanvasLayout | None = Field(default=None, alias="canvasLayout")
