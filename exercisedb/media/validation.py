"""Filename checks applied before any filesystem or network access."""

from exercisedb.models.media import Invalid, MediaRequest

MEDIA_SUFFIX = ".gif"
PARENT_DIRECTORY = ".."
PATH_SEPARATOR = "/"


def validate_filename(raw: str | None) -> MediaRequest | Invalid:
    """Classify a requested media filename as servable or rejected.

    A servable name is non-empty, has no `..` sequence and no `/`, and ends
    with the literal `.gif` suffix (case-sensitive). This function does no I/O.
    """
    if not raw:
        return Invalid(reason="filename is empty")
    if PARENT_DIRECTORY in raw:
        return Invalid(reason="filename contains a parent-directory sequence")
    if PATH_SEPARATOR in raw:
        return Invalid(reason="filename contains a path separator")
    if not raw.endswith(MEDIA_SUFFIX):
        return Invalid(reason=f"filename does not end with {MEDIA_SUFFIX}")
    return MediaRequest(filename=raw)
