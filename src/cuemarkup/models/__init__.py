"""Data models for annotated cue text."""

from cuemarkup.models.annotations import (
    AbsoluteSize,
    AnnotatedText,
    Annotation,
    AnnotationKind,
    BackgroundColor,
    EmphasisMark,
    EmphasisPosition,
    FontStyle,
    ForegroundColor,
    HorizontalInVertical,
    RelativeSize,
    Ruby,
    RubyPosition,
    Strikethrough,
    Style,
    TextEmphasis,
    Typeface,
    Underline,
)

__all__ = [
    "AbsoluteSize",
    "AnnotatedText",
    "Annotation",
    "AnnotationKind",
    "BackgroundColor",
    "EmphasisMark",
    "EmphasisPosition",
    "FontStyle",
    "ForegroundColor",
    "HorizontalInVertical",
    "RelativeSize",
    "Ruby",
    "RubyPosition",
    "Strikethrough",
    "Style",
    "TextEmphasis",
    "Typeface",
    "Underline",
]
