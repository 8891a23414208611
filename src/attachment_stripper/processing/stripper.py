"""Detach attachments from a parsed MIME message."""

import copy
import email
import logging
from email.message import Message
from enum import Enum
from typing import Optional

from ..config import StripperConfig
from ..exceptions import InvalidInputError
from ..models import AttachmentRecord, StripResult
from .mime import MimeAccessor

logger = logging.getLogger(__name__)


class TraversalState(Enum):
    """Whether a Stripper has walked its message yet."""

    UNTRAVERSED = "untraversed"
    TRAVERSED = "traversed"


class Stripper:
    """Split a MIME message into its inline text body and its attachments.

    Inline text/plain parts are kept as the message body. Every other part is
    detached as an AttachmentRecord, except multipart containers, which are
    walked. The work happens once, on first access of either output.
    """

    def __init__(self, message: Message, config: Optional[StripperConfig] = None):
        """Initialize the stripper.

        Args:
            message: Parsed email message
            config: Optional configuration, defaults to StripperConfig()

        Raises:
            InvalidInputError: If message is not an email.message.Message
        """
        if not isinstance(message, Message):
            raise InvalidInputError(
                f"Need an email.message.Message, got {type(message).__name__}"
            )

        self.config = config or StripperConfig()
        self._source = message
        self._state = TraversalState.UNTRAVERSED
        self._result: Optional[StripResult] = None
        self._message: Optional[Message] = None

    @classmethod
    def from_bytes(cls, data: bytes, config: Optional[StripperConfig] = None) -> "Stripper":
        """Parse RFC822 bytes and wrap the message in a Stripper.

        Raises:
            InvalidInputError: If data is not bytes
        """
        if not isinstance(data, (bytes, bytearray)):
            raise InvalidInputError(f"Need RFC822 bytes, got {type(data).__name__}")

        config = config or StripperConfig()
        return cls(email.message_from_bytes(bytes(data), policy=config.policy()), config)

    @classmethod
    def from_string(cls, text: str, config: Optional[StripperConfig] = None) -> "Stripper":
        """Parse an RFC822 string and wrap the message in a Stripper.

        Raises:
            InvalidInputError: If text is not a string
        """
        if not isinstance(text, str):
            raise InvalidInputError(f"Need an RFC822 string, got {type(text).__name__}")

        config = config or StripperConfig()
        return cls(email.message_from_string(text, policy=config.policy()), config)

    def get_message(self) -> Message:
        """Return the message with all attachments detached.

        The result is a copy of the original message whose body is the
        concatenation of the inline text parts. A multipart message comes
        back as a single text/plain part. The original is not modified.
        """
        self._ensure_traversed()
        return self._message

    def get_attachments(self) -> list[AttachmentRecord]:
        """Return the detached attachments in depth-first order."""
        self._ensure_traversed()
        return list(self._result.attachments)

    def _ensure_traversed(self) -> None:
        if self._state is TraversalState.UNTRAVERSED:
            self._detach_all()

    def _detach_all(self) -> None:
        result = StripResult()
        self._handle_part(self._source, result)

        self._result = result
        self._message = self._rebuild(result)
        self._state = TraversalState.TRAVERSED

        logger.debug(
            f"Detached {len(result.attachments)} attachment(s), "
            f"kept {len(result.body_parts)} body fragment(s)"
        )

    def _handle_part(self, container: Message, result: StripResult) -> None:
        for part in MimeAccessor.subparts(container):
            if self._is_inline_text(part):
                logger.debug(f"Inline body: {MimeAccessor.content_type(part)}")
                result.body_parts.append(MimeAccessor.raw_body(part))
            elif self._should_recurse(part):
                logger.debug(f"Descending into {MimeAccessor.content_type(part)}")
                self._handle_part(part, result)
            else:
                result.attachments.append(self._gather_attachment(part))

    def _gather_attachment(self, part: Message) -> AttachmentRecord:
        record = AttachmentRecord(
            filename=MimeAccessor.filename(part),
            content_type=MimeAccessor.content_type(part),
            payload=MimeAccessor.raw_body(part),
        )

        if part.get_content_maintype() == "multipart":
            logger.warning(
                f"Detaching {record.content_type} container with fewer than two parts as a single attachment"
            )
        logger.debug(f"Attachment: {record.content_type} filename={record.filename!r}")

        return record

    @staticmethod
    def _should_recurse(part: Message) -> bool:
        content_type = MimeAccessor.header(part, "Content-Type") or ""
        if "message/rfc822" in content_type.lower():
            return False
        return len(MimeAccessor.subparts(part)) > 1

    @staticmethod
    def _is_inline_text(part: Message) -> bool:
        content_type = MimeAccessor.header(part, "Content-Type") or ""
        if "text/plain" not in content_type.lower():
            return False

        disposition = MimeAccessor.header(part, "Content-Disposition")
        if disposition and "inline" in disposition:
            return True

        # No disposition hint: unnamed plain text belongs to the body
        return not MimeAccessor.filename(part)

    def _rebuild(self, result: StripResult) -> Message:
        message = copy.deepcopy(self._source)
        was_multipart = message.get_content_maintype() == "multipart"

        message.set_payload(result.body(self.config.body_separator))

        if was_multipart:
            message.set_type("text/plain")
            message.del_param("boundary")

        return message
