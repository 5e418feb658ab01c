"""Observability – call-site capture.

A :class:`CallSite` is the source location of the code that issued a log
write. :class:`FrameCallSiteResolver` finds it by walking the live stack past
this package's own frames, or by reading the innermost frame of a raised
exception's traceback.

Resolution never raises: when no frame can be found the resolver returns
``None``, the unresolved call site, and callers fall back to literal output.
"""
from __future__ import annotations

import dataclasses
import logging
import os
import sys
from types import FrameType, ModuleType, TracebackType
from typing import Iterable, Protocol

logger = logging.getLogger(__name__)

UNKNOWN_CLASS_NAME = "[Unknown]"

_OWN_PACKAGE = __name__.rpartition(".")[0]


@dataclasses.dataclass(frozen=True)
class CallSite:
    """Resolved source location of a log call.

    ``class_name`` is the module-qualified declaring scope of the executing
    function: ``pkg.mod.Outer`` for a method of ``Outer``, ``pkg.mod`` for a
    module-level function. It may still contain synthetic segments such as
    ``<locals>``; those are stripped when the type is looked up.
    """

    class_name: str
    file_name: str
    method_name: str
    line_number: int

    @classmethod
    def from_frame(cls, frame: FrameType, line_number: int | None = None) -> CallSite:
        code = frame.f_code
        module_name = frame.f_globals.get("__name__") or ""
        qualname = getattr(code, "co_qualname", code.co_name)
        owner = qualname.rpartition(".")[0]
        class_name = f"{module_name}.{owner}" if module_name and owner else (owner or module_name)
        return cls(
            class_name=class_name,
            file_name=os.path.basename(code.co_filename),
            method_name=code.co_name,
            line_number=frame.f_lineno if line_number is None else line_number,
        )


class CallSiteResolver(Protocol):
    """Port: find the call site of a log write."""

    def resolve(self, skip_frames: int = 0, exc: BaseException | None = None) -> CallSite | None: ...


class FrameCallSiteResolver:
    """Resolve call sites from live frames or exception tracebacks.

    Frames whose module lives in this logging package, or under any of
    *ignore_modules*, are skipped; ``skip_frames`` drops that many further
    frames above the first foreign one.
    """

    def __init__(self, ignore_modules: Iterable[str] = ()) -> None:
        self._ignore_modules: tuple[str, ...] = (_OWN_PACKAGE, *ignore_modules)

    @property
    def ignore_modules(self) -> tuple[str, ...]:
        return self._ignore_modules

    def resolve(self, skip_frames: int = 0, exc: BaseException | None = None) -> CallSite | None:
        try:
            if exc is not None:
                site = self._from_exception(exc)
                if site is not None:
                    return site
            return self._from_stack(skip_frames)
        except Exception:  # noqa: BLE001
            logger.debug("call_site.unresolved", exc_info=True)
            return None

    def _from_stack(self, skip_frames: int) -> CallSite | None:
        frame: FrameType | None = sys._getframe(1)
        try:
            while frame is not None and self._is_ignored(frame):
                frame = frame.f_back
            for _ in range(skip_frames):
                if frame is None:
                    break
                frame = frame.f_back
            return None if frame is None else CallSite.from_frame(frame)
        finally:
            del frame

    def _from_exception(self, exc: BaseException) -> CallSite | None:
        source = exc.__cause__ if exc.__cause__ is not None else exc
        tb = source.__traceback__ or exc.__traceback__
        if tb is None:
            return None
        innermost = _innermost(tb)
        return CallSite.from_frame(innermost.tb_frame, innermost.tb_lineno)

    def _is_ignored(self, frame: FrameType) -> bool:
        module_name = frame.f_globals.get("__name__") or ""
        return any(
            module_name == prefix or module_name.startswith(prefix + ".")
            for prefix in self._ignore_modules
        )


def _innermost(tb: TracebackType) -> TracebackType:
    while tb.tb_next is not None:
        tb = tb.tb_next
    return tb


# ---------------------------------------------------------------------------
# Declaring-type lookup
# ---------------------------------------------------------------------------


def strip_synthetic(class_name: str) -> str:
    """Drop everything from the first synthetic segment (``<locals>``, ``<lambda>`` ...)."""
    kept: list[str] = []
    for part in class_name.split("."):
        if not part or part.startswith("<"):
            break
        kept.append(part)
    return ".".join(kept)


def resolve_declaring_type(class_name: str) -> type | ModuleType | None:
    """Look up the class (or module) named by a call site's ``class_name``.

    Only modules already present in :data:`sys.modules` are consulted; nothing
    is imported. Attribute lookup stops at the first object that is neither a
    class nor a module, so a
    function-local scope resolves to its nearest enclosing class or module.
    Returns ``None`` when the name is empty or cannot be found.
    """
    name = strip_synthetic(class_name)
    if not name:
        return None
    parts = name.split(".")
    for split in range(len(parts), 0, -1):
        module = sys.modules.get(".".join(parts[:split]))
        if module is not None:
            break
    else:
        return None

    owner: type | ModuleType = module
    obj: object = module
    for part in parts[split:]:
        obj = getattr(obj, part, None)
        if obj is None:
            return None
        if not isinstance(obj, (type, ModuleType)):
            break
        owner = obj
    return owner


def class_name_of(owner: type | ModuleType | None, *, simple: bool = False) -> str:
    """Qualified (or simple) name of a resolved owner, or ``[Unknown]``."""
    if owner is None:
        return UNKNOWN_CLASS_NAME
    if isinstance(owner, type):
        name = owner.__name__ if simple else f"{owner.__module__}.{owner.__qualname__}"
    else:
        name = owner.__name__.rpartition(".")[2] if simple else owner.__name__
    return name or UNKNOWN_CLASS_NAME


def package_name_of(owner: type | ModuleType | None) -> str:
    """The package that declares *owner* (``""`` for a top-level module)."""
    if owner is None:
        return UNKNOWN_CLASS_NAME
    module_name = owner.__module__ if isinstance(owner, type) else owner.__name__
    module = sys.modules.get(module_name)
    package = getattr(module, "__package__", None)
    if package is None:
        package = module_name.rpartition(".")[0]
    return package


__all__ = [
    "CallSite",
    "CallSiteResolver",
    "FrameCallSiteResolver",
    "UNKNOWN_CLASS_NAME",
    "class_name_of",
    "package_name_of",
    "resolve_declaring_type",
    "strip_synthetic",
]
