"""Models for detached attachments and traversal state."""

from dataclasses import dataclass, field

from pydantic import BaseModel, Field


class AttachmentRecord(BaseModel):
    """A MIME part detached from a message."""

    filename: str = Field("", description="Resolved filename, empty when the part has none")
    content_type: str = Field(description="Content type as discrete/composite")
    payload: str = Field(description="Raw body of the part, transfer encoding untouched")


@dataclass
class StripResult:
    """Fragments and attachments collected during one traversal."""

    body_parts: list[str] = field(default_factory=list)
    attachments: list[AttachmentRecord] = field(default_factory=list)

    def body(self, separator: str = "") -> str:
        """Join the collected inline fragments."""
        return separator.join(self.body_parts)
