"""HTTP and HTTPS URLs split into protocol, domain, port and document."""

from __future__ import annotations

import re
import sys
from enum import Enum
from typing import Optional

MIN_PORT = 1
MAX_PORT = 65535

SLASH = "/"
PROTOCOL_POSTFIX = "://"
PORT_PREFIX = ":"

INVALID_URL_ERR = "Invalid url"
INVALID_PORT_ERR = "Invalid port"
INVALID_DOMAIN_ERR = "Invalid domain"
INVALID_DOCUMENT_ERR = "Invalid document"
INVALID_PROTOCOL_ERR = "Invalid protocol"

_DOMAIN_PATTERN = r"([0-9a-z\-.]+)"
_URL_RE = re.compile(
    r"(https?)://" + _DOMAIN_PATTERN + r"(?::([0-9]{1,5}))?" + r"(:?(.*))?"
)
_DOMAIN_RE = re.compile(_DOMAIN_PATTERN)
_DOCUMENT_RE = re.compile(r"(\S*)?")


class Protocol(Enum):
    """The supported URL schemes."""

    HTTP = "http"
    HTTPS = "https"


_DEFAULT_PORTS = {Protocol.HTTP: 80, Protocol.HTTPS: 443}


class UrlParsingError(ValueError):
    """Raised when a URL string does not have the expected shape."""


def protocol_to_string(protocol: Protocol) -> str:
    """The scheme name of a protocol."""
    if not isinstance(protocol, Protocol):
        raise ValueError(INVALID_PROTOCOL_ERR)
    return protocol.value


def normalize_document(document: str) -> str:
    """Make sure the document path starts with a slash."""
    if not document:
        return SLASH
    if document.startswith(SLASH):
        return document
    return SLASH + document


def _default_port(protocol: Protocol) -> int:
    try:
        return _DEFAULT_PORTS[protocol]
    except KeyError:
        raise ValueError(INVALID_PROTOCOL_ERR) from None


def _parse_port(text: str, protocol: Protocol) -> int:
    if not text:
        return _default_port(protocol)
    try:
        port = int(text)
    except ValueError:
        raise ValueError(INVALID_PORT_ERR) from None
    if not MIN_PORT <= port <= MAX_PORT:
        raise ValueError(INVALID_PORT_ERR)
    return port


def _to_valid_parts(text: str) -> str:
    """Turn backslashes into slashes and lower-case ASCII letters."""
    return "".join(
        SLASH if ch == "\\" else (ch.lower() if ch.isascii() else ch) for ch in text
    )


class HttpUrl:
    """A parsed HTTP or HTTPS URL."""

    def __init__(self, url: str) -> None:
        match = _URL_RE.fullmatch(_to_valid_parts(url))
        if match is None:
            raise UrlParsingError(INVALID_URL_ERR)
        self._domain = match.group(2)
        self._document = normalize_document(match.group(4) or "")
        self._protocol = Protocol(match.group(1))
        self._port = _parse_port(match.group(3) or "", self._protocol)

    @classmethod
    def from_parts(
        cls,
        domain: str,
        document: str,
        protocol: Protocol = Protocol.HTTP,
        port: Optional[int] = None,
    ) -> HttpUrl:
        """Build a URL from its parts; without a port the protocol's default is used."""
        if _DOMAIN_RE.fullmatch(domain) is None:
            raise ValueError(INVALID_DOMAIN_ERR)
        normalized = normalize_document(document)
        if _DOCUMENT_RE.fullmatch(normalized) is None:
            raise ValueError(INVALID_DOCUMENT_ERR)
        instance = cls.__new__(cls)
        instance._domain = domain
        instance._document = normalized
        instance._protocol = protocol
        if port is None:
            instance._port = _default_port(protocol)
        else:
            instance._port = _parse_port(str(port), protocol)
        return instance

    @property
    def url(self) -> str:
        """The full URL, always with an explicit port."""
        return (
            protocol_to_string(self._protocol)
            + PROTOCOL_POSTFIX
            + self._domain
            + PORT_PREFIX
            + str(self._port)
            + self._document
        )

    @property
    def domain(self) -> str:
        return self._domain

    @property
    def document(self) -> str:
        return self._document

    @property
    def protocol(self) -> Protocol:
        return self._protocol

    @property
    def port(self) -> int:
        return self._port

    def __str__(self) -> str:
        return self.url

    def __repr__(self) -> str:
        return f"HttpUrl({self.url!r})"


def main(argv: Optional[list[str]] = None) -> int:
    """Parse each line of standard input as a URL and describe it."""
    out = sys.stdout
    for raw in sys.stdin:
        line = raw[:-1] if raw.endswith("\n") else raw
        try:
            url = HttpUrl(line)
        except UrlParsingError as err:
            out.write(f"Error: {err}\n")
            continue
        out.write(
            "Current url:\n"
            f"\tProtocol: {protocol_to_string(url.protocol)}\n"
            f"\tDomain: {url.domain}\n"
            f"\tPort: {url.port}\n"
            f"\tDocument: {url.document}\n"
        )
    return 0