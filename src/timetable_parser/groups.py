"""Group names and group metadata derived from spreadsheet file names.

A spreadsheet is named after the groups it covers, e.g. ``315бп-1,316б.xlsx``.
"""

import re
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path

from .constants import (
    GRADUATE_MARKER,
    GROUP_NAME_PATTERN,
    GROUP_NAME_REPLACEMENTS,
    INSTITUTES,
    STUDY_FORM_IN_PERSON,
    STUDY_LEVEL_GRADUATE,
    STUDY_LEVEL_UNDERGRADUATE,
)
from .exceptions import InvalidGroupName, UnrecognizedInstituteDigit
from .models import ClassEntry, Group

_GROUP_NAME_RE = re.compile(GROUP_NAME_PATTERN, re.ASCII)


def split_group_names(file_name: str | Path) -> list[str]:
    """Split a spreadsheet file name into candidate group names.

    Args:
        file_name: File name with or without extension

    Returns:
        Candidate group names, in file name order
    """
    stem = Path(file_name).stem
    for old, new in GROUP_NAME_REPLACEMENTS:
        stem = stem.replace(old, new)
    return stem.split(",")


def validate_group_name(group_name: str) -> bool:
    return _GROUP_NAME_RE.fullmatch(group_name) is not None


def parse_group_names(file_name: str | Path) -> list[str]:
    """Split and validate the group names of a spreadsheet file name.

    Args:
        file_name: File name with or without extension

    Returns:
        Group names

    Raises:
        InvalidGroupName: If any candidate is not a valid group name
    """
    names = split_group_names(file_name)
    for name in names:
        if not validate_group_name(name):
            raise InvalidGroupName(name, Path(file_name).name)
    return names


def resolve_institute(group_name: str) -> str:
    """Institute of a group, from the first digit of its name.

    Raises:
        UnrecognizedInstituteDigit: If the digit maps to no institute
    """
    try:
        return INSTITUTES[group_name[:1]]
    except KeyError:
        raise UnrecognizedInstituteDigit(group_name) from None


def resolve_study_level(group_name: str) -> str:
    if GRADUATE_MARKER in group_name:
        return STUDY_LEVEL_GRADUATE
    return STUDY_LEVEL_UNDERGRADUATE


def build_groups(
    group_names: Sequence[str],
    classes: Sequence[ClassEntry],
    last_update: datetime | None = None,
) -> list[Group]:
    """Build one group per name, all sharing the same classes.

    Classes are not split by group or subgroup: every group of a file gets
    the whole class list.

    Args:
        group_names: Validated group names
        classes: Classes extracted from the file
        last_update: Parse time; defaults to now

    Returns:
        List of groups

    Raises:
        UnrecognizedInstituteDigit: If a group maps to no institute
    """
    if last_update is None:
        last_update = datetime.now().astimezone()

    shared_classes = tuple(classes)
    return [
        Group(
            group_name=name,
            last_update=last_update,
            institute=resolve_institute(name),
            study_level=resolve_study_level(name),
            study_form=STUDY_FORM_IN_PERSON,
            classes=shared_classes,
        )
        for name in group_names
    ]
