"""Mini README: Segment classification and buffer sizing.

Structure:
    * SegmentClass - enumeration of horizontal, vertical and mixed segments.
    * BufferSizing - along-track, cross-track and vertical half-extents.
    * classify_segment - decide which extent dominates a segment.
    * size_buffers - derive the half-extents for a classified segment.

A cruise leg needs along-track slack and little vertical slack; a climb or
descent needs the opposite; anything in between gets both. Exact ties in
either ratio test fall through to ``MIXED``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..configuration import VolumeConfig


class SegmentClass(str, Enum):
    """Which displacement dominates a segment."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    MIXED = "mixed"


@dataclass(frozen=True, slots=True)
class BufferSizing:
    """Half-extents (metres) of the volume around a segment midpoint."""

    along_track: float
    cross_track: float
    vertical: float


def classify_segment(
    horizontal_distance: float, vertical_distance: float, config: VolumeConfig
) -> SegmentClass:
    """Classify a segment from its horizontal and vertical displacement."""

    if horizontal_distance > config.alpha_h * vertical_distance:
        return SegmentClass.HORIZONTAL
    if vertical_distance > config.alpha_v * horizontal_distance:
        return SegmentClass.VERTICAL
    return SegmentClass.MIXED


def size_buffers(
    segment_class: SegmentClass,
    horizontal_distance: float,
    vertical_distance: float,
    config: VolumeConfig,
) -> BufferSizing:
    """Return the buffer half-extents for a classified segment."""

    if segment_class is SegmentClass.HORIZONTAL:
        return BufferSizing(
            along_track=horizontal_distance / 2.0 + config.tse_h,
            cross_track=config.tse_h,
            vertical=config.tse_v,
        )
    if segment_class is SegmentClass.VERTICAL:
        return BufferSizing(
            along_track=config.tse_h,
            cross_track=config.tse_h,
            vertical=vertical_distance / 2.0 + config.tse_v,
        )
    return BufferSizing(
        along_track=horizontal_distance / 2.0 + config.tse_h,
        cross_track=config.tse_h,
        vertical=vertical_distance / 2.0 + config.tse_v,
    )
