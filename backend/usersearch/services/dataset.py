"""Read-only access to the XML user dataset."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from usersearch.services._shared.dto import User
from usersearch.services._shared.errors import DatasetError

log = logging.getLogger(__name__)


def _row_to_user(row: ET.Element) -> User:
    """Project a ``<row>`` element onto a :class:`User`."""
    first_name = (row.findtext("first_name") or "").strip()
    last_name = (row.findtext("last_name") or "").strip()
    return User(
        id=int(row.findtext("id") or 0),
        name=f"{first_name} {last_name}",
        age=int(row.findtext("age") or 0),
        about=(row.findtext("about") or "").strip(),
        gender=(row.findtext("gender") or "").strip(),
    )


def load_users(path: str | Path) -> list[User]:
    """
    Load every user of the dataset, in file order.

    The file is read on each call; nothing is cached.

    :param path: Location of a ``<root><row>...</row></root>`` XML document.
    :type path: str | pathlib.Path
    :returns: Users in dataset order.
    :rtype: list[User]
    :raises DatasetError: If the file is missing, malformed or holds
        non-numeric ``id``/``age`` values.
    """
    try:
        tree = ET.parse(path)
    except (OSError, ET.ParseError) as exc:
        raise DatasetError(path=str(path), detail=str(exc)) from exc

    try:
        users = [_row_to_user(row) for row in tree.getroot().iter("row")]
    except ValueError as exc:
        raise DatasetError(path=str(path), detail=str(exc)) from exc

    log.debug("dataset.loaded path=%s users=%d", path, len(users))
    return users
