"""Extraction domain models.

Value types passed between the pipeline stages. Lines and matches are
plain frozen dataclasses; ReplacementRecord is a Pydantic model because
it is what ends up serialized into the catalog.
"""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from i18n_extractor.interfaces.classifier import LineMetadata, LineRole


@dataclass(frozen=True)
class Line:
    """One line of a template as read from disk.

    Attributes:
        number: 1-based line number.
        raw: The line text, possibly with its trailing newline.
        metadata: Classifier output for this line, None if uncovered.
    """

    number: int
    raw: str
    metadata: LineMetadata | None = None


@dataclass(frozen=True)
class TextMatch:
    """Translatable text found on a line.

    Attributes:
        text: The human-readable text, without quotes or escapes.
        role: The role the text was found under.
        start: Start offset of the span to substitute in the line content.
        end: End offset (exclusive) of that span.
        kind: "text" for free text that must become evaluated output,
            "literal" for a quoted string inside Ruby code.
    """

    text: str
    role: LineRole
    start: int
    end: int
    kind: str = "text"


class ReplacementRecord(BaseModel):
    """Outcome of a replacement for one line.

    Either every field is set or none is; the all-None record is the
    "no replacement" sentinel stored for lines left untouched.
    """

    model_config = ConfigDict(frozen=True)

    key_name: str | None = Field(default=None, description="Generated catalog key")
    replaced_text: str | None = Field(default=None, description="Original text stored in the catalog")
    modified_line: str | None = Field(default=None, description="Rewritten line including indentation")
    path: str | None = Field(default=None, description="Template the line belongs to")

    @model_validator(mode="after")
    def check_all_or_nothing(self) -> "ReplacementRecord":
        values = (self.key_name, self.replaced_text, self.modified_line, self.path)
        populated = [v is not None for v in values]
        if any(populated) and not all(populated):
            raise ValueError("ReplacementRecord fields must be all set or all None")
        return self

    @classmethod
    def empty(cls) -> "ReplacementRecord":
        """The "no replacement" sentinel."""
        return cls()

    @property
    def is_empty(self) -> bool:
        return self.key_name is None


class LineOutcome(str, Enum):
    """Whether the document loop keeps going after a line."""

    CONTINUE = "continue"
    ABORT = "abort"


@dataclass(frozen=True)
class LineResult:
    """What the line processor reports back for one line.

    Attributes:
        proposed: A replacement was proposed (not necessarily applied).
        outcome: CONTINUE, or ABORT to copy the rest of the file as-is.
    """

    proposed: bool
    outcome: LineOutcome = LineOutcome.CONTINUE
