"""Read-only accessors over parsed MIME parts."""

import re
from email.generator import BytesGenerator
from email.message import Message
from email.policy import EmailPolicy, Policy
from email.utils import collapse_rfc2231_value
from io import BytesIO
from typing import Optional

# Blank line ending a serialized header block
_HEADER_END = re.compile(r"\r?\n\r?\n")
_LEADING_NEWLINE = re.compile(r"^\r?\n")


class MimeAccessor:
    """Uniform access to the pieces of a MIME part the stripper inspects."""

    @staticmethod
    def header(part: Message, name: str) -> Optional[str]:
        """Return the raw value of a header, or None when it is absent.

        Args:
            part: MIME part
            name: Header name (case-insensitive)

        Returns:
            Header value as a plain string, or None
        """
        value = part.get(name)
        if value is None:
            return None
        return str(value)

    @staticmethod
    def subparts(part: Message) -> list[Message]:
        """List the parts of a MIME part.

        A multipart part yields its children. Any other part, message/rfc822
        included, yields itself as its only part.
        """
        if part.get_content_maintype() == "multipart" and part.is_multipart():
            return list(part.get_payload())
        return [part]

    @staticmethod
    def content_type(part: Message) -> str:
        """Return the content type as discrete/composite."""
        return f"{part.get_content_maintype()}/{part.get_content_subtype()}"

    @staticmethod
    def filename(part: Message) -> str:
        """Resolve the filename of a part.

        The Content-Type filename parameter wins over the Content-Disposition
        one.

        Args:
            part: MIME part

        Returns:
            Filename, or an empty string if neither header carries one
        """
        filename = MimeAccessor._param(part, "filename", "content-type")
        if filename:
            return filename

        if part.get("Content-Disposition") is not None:
            filename = MimeAccessor._param(part, "filename", "content-disposition")
            if filename:
                return filename

        return ""

    @staticmethod
    def raw_body(part: Message) -> str:
        """Return the undecoded body of a part.

        For a leaf this is the parser's payload text. Bytes that were not
        ASCII in the source are kept as surrogate escapes, so
        ``payload.encode("ascii", "surrogateescape")`` gives back the original
        bytes. For a container (multipart or message/rfc822) it is everything
        below the part's own header block, boundaries and nested headers
        included, serialized without refolding any header.
        """
        if not part.is_multipart():
            # get_payload() would charset-decode surrogate escapes with 'replace'
            payload = part._payload
            return payload if isinstance(payload, str) else ""

        policy = MimeAccessor._raw_policy(part)
        try:
            buffer = BytesIO()
            BytesGenerator(buffer, mangle_from_=False, policy=policy).flatten(part)
            text = buffer.getvalue().decode("ascii", "surrogateescape")
        except UnicodeEncodeError:
            # Parsed from text holding real non-ASCII characters, no surrogates to keep
            text = part.as_string(policy=policy)

        if not part.keys():
            return _LEADING_NEWLINE.sub("", text, count=1)

        pieces = _HEADER_END.split(text, maxsplit=1)
        return pieces[1] if len(pieces) == 2 else ""

    @staticmethod
    def _raw_policy(part: Message) -> Policy:
        # Parsed headers are written back as they appeared in the source
        policy = part.policy.clone(max_line_length=None)
        if isinstance(policy, EmailPolicy):
            policy = policy.clone(refold_source="none")
        return policy

    @staticmethod
    def _param(part: Message, name: str, header: str) -> str:
        value = part.get_param(name, header=header)
        if value is None:
            return ""
        # RFC 2231 parameters come back as (charset, language, value)
        return collapse_rfc2231_value(value)
