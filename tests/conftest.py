"""Shared message fixtures."""

import email
from email.message import Message

import pytest

SCENARIO_A = """\
From: sender@example.com
To: recipient@example.com
Subject: Files for the meeting
MIME-Version: 1.0
Content-Type: multipart/mixed; boundary="outer"

This is a multi-part message in MIME format.
--outer
Content-Type: text/plain; charset=us-ascii
Content-Disposition: inline

Hello there.

--outer
Content-Type: text/plain; name="notes.txt"
Content-Disposition: attachment; filename="notes.txt"

some notes
--outer
Content-Type: application/postscript
Content-Disposition: attachment; filename="wzl.ps"

%!PS-Adobe-3.0
showpage
--outer
Content-Type: text/html
Content-Disposition: attachment; filename="zeldo.html"

<html><body>zeldo</body></html>
--outer--
"""

SCENARIO_B = """\
From: sender@example.com
To: recipient@example.com
Subject: Fwd: Inner
MIME-Version: 1.0
Content-Type: multipart/mixed; boundary="b1"

--b1
Content-Type: text/plain

First line.
--b1
Content-Type: message/rfc822

From: inner@example.com
Subject: Inner
MIME-Version: 1.0
Content-Type: multipart/mixed; boundary="inner"

--inner
Content-Type: text/plain

inner text
--inner
Content-Type: application/pdf; name="x.pdf"
Content-Disposition: attachment; filename="x.pdf"

JVBERi0xLjQK
--inner--
--b1
Content-Type: text/plain

Second line.
--b1--
"""

NESTED = """\
From: sender@example.com
Subject: Nested
MIME-Version: 1.0
Content-Type: multipart/mixed; boundary="mixed"

--mixed
Content-Type: multipart/alternative; boundary="alt"

--alt
Content-Type: text/plain

plain version
--alt
Content-Type: text/html

<p>html version</p>
--alt--
--mixed
Content-Type: image/png; name="logo.png"
Content-Disposition: attachment; filename="logo.png"
Content-Transfer-Encoding: base64

iVBORw0KGgo=
--mixed
Content-Type: application/pdf
Content-Disposition: attachment; filename="report.pdf"
Content-Transfer-Encoding: base64

JVBERi0xLjQK
--mixed--
"""

SINGLE_CHILD_CONTAINER = """\
From: sender@example.com
Subject: Lonely alternative
MIME-Version: 1.0
Content-Type: multipart/mixed; boundary="mixed"

--mixed
Content-Type: text/plain

body text
--mixed
Content-Type: multipart/alternative; boundary="alt"

--alt
Content-Type: text/plain

only child
--alt--
--mixed--
"""

PLAIN = """\
From: sender@example.com
Subject: Just text
Content-Type: text/plain; charset=us-ascii

Nothing attached here.
"""


def parse(text: str) -> Message:
    return email.message_from_string(text)


@pytest.fixture
def scenario_a() -> Message:
    return parse(SCENARIO_A)


@pytest.fixture
def scenario_b() -> Message:
    return parse(SCENARIO_B)


@pytest.fixture
def nested() -> Message:
    return parse(NESTED)


@pytest.fixture
def single_child_container() -> Message:
    return parse(SINGLE_CHILD_CONTAINER)


@pytest.fixture
def plain() -> Message:
    return parse(PLAIN)


EIGHT_BIT = (
    b"From: sender@example.com\n"
    b"Subject: Menu\n"
    b"MIME-Version: 1.0\n"
    b'Content-Type: multipart/mixed; boundary="x"\n'
    b"\n"
    b"--x\n"
    b"Content-Type: text/plain; charset=utf-8\n"
    b"Content-Transfer-Encoding: 8bit\n"
    b"\n"
    b"caf\xc3\xa9\n"
    b"--x\n"
    b"Content-Type: application/octet-stream\n"
    b"Content-Disposition: attachment; filename*=utf-8''d%C3%A9j%C3%A0.bin\n"
    b"Content-Transfer-Encoding: binary\n"
    b"\n"
    b"\x00\x01\xfe\xff\n"
    b"--x--\n"
)

LONG_SUBJECT = "Subject: " + " ".join(["a very long subject line that runs well past seventy eight columns"] * 2)

FORWARDED_LONG_HEADER = (
    "From: sender@example.com\n"
    "MIME-Version: 1.0\n"
    'Content-Type: multipart/mixed; boundary="b1"\n'
    "\n"
    "--b1\n"
    "Content-Type: text/plain\n"
    "\n"
    "See below.\n"
    "--b1\n"
    "Content-Type: message/rfc822\n"
    "\n"
    "From: inner@example.com\n"
    f"{LONG_SUBJECT}\n"
    "Content-Type: text/plain\n"
    "\n"
    "inner text\n"
    "--b1--\n"
)
