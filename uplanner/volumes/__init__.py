"""Mini README: Operation volume geometry.

Exports the segment classifier, the oriented buffer builder and the volume
assembler. Together they turn a reduced waypoint list into the ordered
``operationVolumes`` of a U-Plan.
"""

from .assembler import Volume, VolumeAssembler, format_timestamp, generate_volumes
from .buffer import OrientedPolygon, build_oriented_buffer, segment_midpoint
from .classifier import BufferSizing, SegmentClass, classify_segment, size_buffers

__all__ = [
    "BufferSizing",
    "OrientedPolygon",
    "SegmentClass",
    "Volume",
    "VolumeAssembler",
    "build_oriented_buffer",
    "classify_segment",
    "format_timestamp",
    "generate_volumes",
    "segment_midpoint",
    "size_buffers",
]
