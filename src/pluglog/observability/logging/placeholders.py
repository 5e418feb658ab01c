"""Observability – Placeholder tokens and FormatSpec.

A :class:`FormatSpec` is a ``%``-style format string plus an ordered
sequence of arguments. Arguments are either literal values or
:class:`Placeholder` tokens that stand for call-site data known only when a
log line is written::

    spec = FormatSpec("%s.%s:%d", (Placeholder.SIMPLE_CLASS_NAME,
                                   Placeholder.METHOD_NAME,
                                   Placeholder.LINE_NUMBER))

Rendering is two passes: tokens are first resolved to plain values, then the
format string is applied with ``%``. Output only contains the text the caller
passed to the log method where ``Placeholder.SUPPLIED`` appears in the args;
a format without it discards that text.
"""
from __future__ import annotations

import dataclasses
import logging
from enum import Enum, auto
from typing import Any

from pluglog.kernel.utils import require_not_none
from pluglog.observability.logging.callsite import (
    UNKNOWN_CLASS_NAME,
    CallSite,
    class_name_of,
    package_name_of,
    resolve_declaring_type,
)

logger = logging.getLogger(__name__)

ELLIPSIS = "…"


class Placeholder(Enum):
    """Tokens replaced with call-site or caller-supplied data at write time."""

    CLASS_NAME = auto()
    SIMPLE_CLASS_NAME = auto()
    FILE_NAME = auto()
    PACKAGE_NAME = auto()
    METHOD_NAME = auto()
    LINE_NUMBER = auto()
    FRAME_HASH_CODE = auto()
    SUPPLIED = auto()


def resolve_placeholder(placeholder: Placeholder, call_site: CallSite, supplied: str) -> Any:
    """Return the concrete value *placeholder* stands for."""
    if placeholder is Placeholder.SUPPLIED:
        return supplied
    if placeholder is Placeholder.FILE_NAME:
        return call_site.file_name
    if placeholder is Placeholder.METHOD_NAME:
        return call_site.method_name
    if placeholder is Placeholder.LINE_NUMBER:
        return call_site.line_number
    if placeholder is Placeholder.FRAME_HASH_CODE:
        return hash(call_site)
    try:
        owner = resolve_declaring_type(call_site.class_name)
        if placeholder is Placeholder.PACKAGE_NAME:
            return package_name_of(owner)
        return class_name_of(owner, simple=placeholder is Placeholder.SIMPLE_CLASS_NAME)
    except Exception:  # noqa: BLE001
        logger.debug("placeholder.unresolved placeholder=%s", placeholder.name, exc_info=True)
        return UNKNOWN_CLASS_NAME


def truncate(text: str, max_length: int | None) -> str:
    """Cut *text* to *max_length*, marking the cut with a trailing ellipsis."""
    if max_length is None or len(text) <= max_length:
        return text
    return text[: max_length - 1] + ELLIPSIS


@dataclasses.dataclass(frozen=True)
class FormatSpec:
    """A format string and its (literal or placeholder) arguments."""

    format: str
    args: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        require_not_none(self.format, "format must not be None", parameter="format")
        object.__setattr__(self, "args", tuple(self.args))

    @classmethod
    def of(cls, format: str, *args: Any) -> FormatSpec:  # noqa: A002
        return cls(format, args)

    @property
    def uses_supplied(self) -> bool:
        """Whether caller-supplied text appears in the rendered output."""
        return Placeholder.SUPPLIED in self.args

    def resolve_args(self, call_site: CallSite, supplied: str) -> tuple[Any, ...]:
        """First pass: replace every placeholder with its concrete value."""
        return tuple(
            resolve_placeholder(arg, call_site, supplied) if isinstance(arg, Placeholder) else arg
            for arg in self.args
        )

    def render(self, call_site: CallSite | None, supplied: str, max_length: int | None = None) -> str:
        """Produce the final string.

        With no args, or no call site, the format string is used verbatim.
        A format/argument mismatch also falls back to the verbatim format.
        """
        text = self.format
        if self.args and call_site is not None:
            resolved = self.resolve_args(call_site, supplied)
            try:
                text = self.format % resolved
            except (TypeError, ValueError, KeyError):
                logger.debug("format_spec.render_failed format=%r", self.format, exc_info=True)
        return truncate(text, max_length)


__all__ = ["ELLIPSIS", "FormatSpec", "Placeholder", "resolve_placeholder", "truncate"]
