import json
import logging
import sys
from pathlib import Path
from typing import Any

from patchview.exceptions import PatchSourceError

logger = logging.getLogger(__name__)

# Fields the patch-generation service has been seen to put the diff under.
PATCH_FIELDS = ("patch", "diff", "content")


def extract_patch_text(payload: Any, source: str = "payload") -> str:
    """
    Pull the diff text out of a patch-generation response.

    Args:
        payload: Plain diff text, JSON text, or an already decoded JSON object.
        source: Label used in error messages.

    Returns:
        The patch text, unmodified.

    Raises:
        PatchSourceError: If the payload holds no usable string.
    """

    if isinstance(payload, str):
        stripped = payload.lstrip()
        if not stripped.startswith(("{", '"')):
            return payload
        try:
            payload = json.loads(payload)
        except json.JSONDecodeError:
            # Not JSON after all; treat it as raw text.
            return payload
        if isinstance(payload, str):
            return payload

    if isinstance(payload, dict):
        for field in PATCH_FIELDS:
            value = payload.get(field)
            if isinstance(value, str):
                return value
        nested = payload.get("data")
        if isinstance(nested, dict):
            return extract_patch_text(nested, source=source)
        logger.warning("No patch field in %s (keys: %s)", source, sorted(payload))
        raise PatchSourceError(
            source, KeyError(f"none of {', '.join(PATCH_FIELDS)} present")
        )

    logger.warning("Unusable patch payload from %s: %s", source, type(payload).__name__)
    raise PatchSourceError(source, TypeError(f"unsupported payload type {type(payload).__name__}"))


def read_patch_source(path: Path | str) -> str:
    """Read patch text from a file, or stdin when `path` is "-"."""

    if str(path) == "-":
        return extract_patch_text(sys.stdin.read(), source="stdin")

    path = Path(path)
    try:
        text = path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise PatchSourceError(path, e) from e

    if path.suffix == ".json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise PatchSourceError(path, e) from e
        return extract_patch_text(data, source=str(path))
    return text
