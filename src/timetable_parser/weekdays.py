"""Segmentation of the schedule rows into weekday bands."""

import logging

from .constants import COL_LABEL, SLOT_ROWS
from .exceptions import LayoutDetectionFailure
from .grid import Grid
from .models import Band, Weekday

logger = logging.getLogger(__name__)


def segment_weekdays(grid: Grid, first_row: int, last_row: int) -> list[Band]:
    """Split rows ``first_row..last_row`` into six weekday bands.

    Each weekday label closes the band of the previous day one row above it
    and opens its own band one row below it. Saturday's band runs to
    ``last_row``.

    Args:
        grid: Timetable grid
        first_row: Row of the Monday label
        last_row: Last schedule row

    Returns:
        Bands for Monday..Saturday

    Raises:
        LayoutDetectionFailure: If a band is missing or has an invalid size
    """
    bands = [Band(weekday) for weekday in Weekday]

    for row in range(first_row, last_row + 1):
        weekday = Weekday.from_label(grid.cell(row, COL_LABEL))
        if weekday is None:
            continue

        band = bands[weekday.value]
        if weekday is not Weekday.MONDAY:
            bands[weekday.value - 1].end = row - 1
        band.start = row + 1

        # Some files have a spurious blank row right under the Thursday label
        if (
            weekday is Weekday.THURSDAY
            and grid.is_blank(band.start, COL_LABEL)
            and not grid.is_blank(band.start + 1, COL_LABEL)
        ):
            logger.debug("Skipping blank row %d after Thursday label", band.start)
            band.start += 1

        if weekday is Weekday.SATURDAY:
            band.end = last_row

    friday = bands[Weekday.FRIDAY.value]
    saturday = bands[Weekday.SATURDAY.value]
    if (
        friday.start is not None
        and friday.end is None
        and saturday.start is None
        and saturday.end is None
    ):
        # No Saturday label: Friday is the last band, Saturday is empty
        friday.end = last_row
        saturday.start = last_row
        saturday.end = last_row

    validate_bands(bands)
    return bands


def validate_bands(bands: list[Band]) -> None:
    """Check that every band is located and made of whole slots.

    Args:
        bands: Bands for Monday..Saturday

    Raises:
        LayoutDetectionFailure: On the first invalid band
    """
    for band in bands:
        if band.start is None:
            raise LayoutDetectionFailure(
                f"could not find the start row of {band.weekday.label}"
            )
    for band in bands:
        if band.end is None:
            raise LayoutDetectionFailure(
                f"could not find the end row of {band.weekday.label}"
            )
    for band in bands:
        if band.span % SLOT_ROWS != 0 and band.start != band.end:
            raise LayoutDetectionFailure(
                f"{band.weekday.label} spans {band.span} rows, "
                f"not a multiple of {SLOT_ROWS} (rows {band.start}-{band.end})"
            )
