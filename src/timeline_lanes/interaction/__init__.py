"""Pointer and keyboard interaction state."""

from timeline_lanes.interaction.drag import (
    DragKind,
    DragSession,
    DragStateMachine,
    DragUpdate,
    PointerReleaseHub,
    grip_for_offset,
)
from timeline_lanes.interaction.rename import EditSession, InlineRenameEditor

__all__ = [
    "DragKind",
    "DragSession",
    "DragStateMachine",
    "DragUpdate",
    "EditSession",
    "InlineRenameEditor",
    "PointerReleaseHub",
    "grip_for_offset",
]
