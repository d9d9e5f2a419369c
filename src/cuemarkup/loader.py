"""Read annotated cue text from JSON documents.

Document shape::

    {
      "text": "Hello world",
      "annotations": [
        {"kind": {"type": "style", "style": "bold"}, "start": 0, "end": 5},
        {"kind": {"type": "background_color", "color": 4278190335},
         "start": 0, "end": 11}
      ]
    }

``text`` may be ``null``.  Annotation ``kind`` objects are discriminated by
``type`` and mirror the dataclasses in ``cuemarkup.models``.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from pydantic import TypeAdapter, ValidationError

from cuemarkup.models import AnnotatedText, Annotation

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

__all__ = ["CueDocumentError", "load_cue_document", "parse_cue_document"]

_ANNOTATION_ADAPTER: TypeAdapter[Annotation] = TypeAdapter(Annotation)

# Validation error types meaning "a kind or enum value this version does not
# know". Annotations failing only with these are dropped, not rejected.
_UNRECOGNISED_ERROR_TYPES = frozenset({"union_tag_invalid", "enum"})


class CueDocumentError(Exception):
    """Raised when a cue document is not valid JSON or fails validation."""


def _check_range(text: str, index: int, annotation: Annotation) -> None:
    length = len(text)
    if not 0 <= annotation.start <= annotation.end <= length:
        msg = (
            f"annotation {index} range [{annotation.start}, {annotation.end}) "
            f"is outside text of length {length}"
        )
        raise CueDocumentError(msg)


def _is_unrecognised(exc: ValidationError) -> bool:
    return all(error["type"] in _UNRECOGNISED_ERROR_TYPES for error in exc.errors())


def _parse_annotations(text: str, raw_annotations: object) -> list[Annotation]:
    if not isinstance(raw_annotations, list):
        raise CueDocumentError("'annotations' must be a list")

    annotations: list[Annotation] = []
    for index, raw_annotation in enumerate(raw_annotations):
        try:
            annotation = _ANNOTATION_ADAPTER.validate_python(raw_annotation)
        except ValidationError as exc:
            if not _is_unrecognised(exc):
                raise CueDocumentError(f"invalid annotation {index}: {exc}") from exc
            logger.debug(
                "Dropping annotation %d with unrecognised kind %r",
                index,
                raw_annotation.get("kind"),
            )
            continue
        _check_range(text, index, annotation)
        annotations.append(annotation)
    return annotations


def parse_cue_document(raw: str | bytes) -> AnnotatedText | None:
    """Parse a JSON cue document.

    Returns:
        The annotated text, or ``None`` if the document's ``text`` is null.

    Raises:
        CueDocumentError: Malformed JSON, structurally invalid annotations,
            or ranges outside the text.  Annotations of an unrecognised
            kind are dropped instead.
    """
    try:
        document = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise CueDocumentError(f"invalid JSON: {exc}") from exc

    if not isinstance(document, dict):
        raise CueDocumentError("cue document must be a JSON object")

    text = document.get("text")
    if text is None:
        return None
    if not isinstance(text, str):
        raise CueDocumentError("'text' must be a string or null")

    annotations = _parse_annotations(text, document.get("annotations", []))
    logger.debug("Parsed cue document: %d annotations", len(annotations))
    return AnnotatedText(text=text, annotations=tuple(annotations))


def load_cue_document(path: Path) -> AnnotatedText | None:
    """Read and parse the cue document at *path*."""
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise CueDocumentError(f"cannot read {path}: {exc}") from exc
    return parse_cue_document(raw)
