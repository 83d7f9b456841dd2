"""Pydantic models and result types for stringext."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, Field


# --- Results ---

@dataclass(frozen=True)
class ShortenResult:
    text: str
    was_truncated: bool


@dataclass(frozen=True)
class RepairConfig:
    """Options handed to the HTML repairer."""

    encoding: str = "utf-8"
    xhtml: bool = True
    omit_doctype: bool = True
    numeric_entities: bool = True


# --- Configuration ---

class StripOptions(BaseModel):
    keep_paragraphs: bool = True
    keep_italic: bool = True
    keep_underline: bool = True
    keep_bold: bool = True
    keep_line_break: bool = True
    extra_tags: list[str] = Field(default_factory=list)


class ShortenConfig(BaseModel):
    length: int = 300
    ellipsis: str = "..."


class TruncateConfig(BaseModel):
    length: int = 100
    suffix: str = "..."


class HighlightConfig(BaseModel):
    class_name: str = "highlight"


class YouTubeConfig(BaseModel):
    embed_base: str = "https://www.youtube.com/embed/"
    thumbnail_base: str = "https://i.ytimg.com/vi"
    width: int = 560
    height: int = 315


class RepairSettings(BaseModel):
    encoding: str = "utf-8"
    xhtml: bool = True
    omit_doctype: bool = True
    numeric_entities: bool = True

    def to_repair_config(self) -> RepairConfig:
        return RepairConfig(
            encoding=self.encoding,
            xhtml=self.xhtml,
            omit_doctype=self.omit_doctype,
            numeric_entities=self.numeric_entities,
        )


class AppConfig(BaseModel):
    shorten: ShortenConfig = Field(default_factory=ShortenConfig)
    truncate: TruncateConfig = Field(default_factory=TruncateConfig)
    strip: StripOptions = Field(default_factory=StripOptions)
    highlight: HighlightConfig = Field(default_factory=HighlightConfig)
    youtube: YouTubeConfig = Field(default_factory=YouTubeConfig)
    repair: RepairSettings = Field(default_factory=RepairSettings)
