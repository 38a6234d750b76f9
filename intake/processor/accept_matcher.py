"""Matches a candidate's declared type and name against an accept string.

The accept string uses the same syntax as the HTML ``accept`` attribute:
comma-separated tokens, each one of

- a mimetype family wildcard, e.g. ``image/*``
- a file extension, e.g. ``.csv``
- an exact mimetype, e.g. ``image/jpeg``

``*`` on its own accepts everything.
"""

from intake.processor.models import CandidateFile

ACCEPT_ALL = "*"


def is_accepted(file: CandidateFile, accept: str) -> bool:
    """Return True if any token of ``accept`` matches the file."""
    if accept == ACCEPT_ALL:
        return True

    mime_type = file.mime_type.lower()
    name = file.name.lower()
    return any(_token_matches(token, mime_type, name) for token in parse_accept(accept))


def parse_accept(accept: str) -> list[str]:
    return [token.strip().lower() for token in accept.split(",")]


def _token_matches(token: str, mime_type: str, name: str) -> bool:
    if token.endswith("/*"):
        return mime_type.split("/")[0] == token.split("/")[0]
    if token.startswith("."):
        return name.endswith(token)
    return mime_type == token
