"""Mini README: Tests for segment classification and buffer sizing."""

from __future__ import annotations

import pytest

from uplanner.configuration import VolumeConfig
from uplanner.volumes import BufferSizing, SegmentClass, classify_segment, size_buffers

CONFIG = VolumeConfig(tse_h=15.0, tse_v=10.0, alpha_h=7.0, alpha_v=1.0, time_buffer=5.0)


@pytest.mark.parametrize(
    ("horizontal", "vertical", "expected"),
    [
        (100.0, 5.0, SegmentClass.HORIZONTAL),
        (11.1, 50.0, SegmentClass.VERTICAL),
        (30.0, 10.0, SegmentClass.MIXED),
        (0.0, 0.0, SegmentClass.MIXED),
        (50.0, 0.0, SegmentClass.HORIZONTAL),
        (0.0, 3.0, SegmentClass.VERTICAL),
    ],
)
def test_classify_segment(horizontal: float, vertical: float, expected: SegmentClass) -> None:
    assert classify_segment(horizontal, vertical, CONFIG) is expected


def test_ties_fall_through_to_mixed() -> None:
    """Exact equality in either ratio test resolves to mixed."""

    assert classify_segment(70.0, 10.0, CONFIG) is SegmentClass.MIXED
    assert classify_segment(10.0, 10.0, CONFIG) is SegmentClass.MIXED


def test_horizontal_sizing() -> None:
    sizing = size_buffers(SegmentClass.HORIZONTAL, 100.0, 4.0, CONFIG)
    assert sizing == BufferSizing(along_track=65.0, cross_track=15.0, vertical=10.0)


def test_vertical_sizing() -> None:
    sizing = size_buffers(SegmentClass.VERTICAL, 11.0, 50.0, CONFIG)
    assert sizing == BufferSizing(along_track=15.0, cross_track=15.0, vertical=35.0)


def test_mixed_sizing_combines_both_extents() -> None:
    sizing = size_buffers(SegmentClass.MIXED, 30.0, 10.0, CONFIG)
    assert sizing == BufferSizing(along_track=30.0, cross_track=15.0, vertical=15.0)


def test_sizing_uses_configured_margins() -> None:
    config = VolumeConfig(tse_h=2.0, tse_v=1.0)
    sizing = size_buffers(SegmentClass.HORIZONTAL, 10.0, 0.0, config)
    assert sizing.along_track == pytest.approx(7.0)
    assert sizing.cross_track == pytest.approx(2.0)
    assert sizing.vertical == pytest.approx(1.0)
