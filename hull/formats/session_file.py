"""
Grid Hull - Session Files

Loads and saves session snapshots as JSON documents:

    {"width": 16, "height": 16, "cells": "0010...", "seed": {"x": 3, "y": 4}}
"""

import json
import logging
from pathlib import Path
from typing import Union

from ..core.session import HullSession
from .snapshot import MalformedSnapshotError, Snapshot

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read_snapshot(path: PathLike) -> Snapshot:
    """
    Read a snapshot from a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist
        MalformedSnapshotError: If the file is not a valid snapshot document
    """
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise MalformedSnapshotError(f"{path}: {e}") from e
    return Snapshot.from_dict(data)


def write_snapshot(snapshot: Snapshot, path: PathLike):
    """Write a snapshot to a JSON file."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(snapshot.to_dict(), f, indent=2)


def save_session(session: HullSession, path: PathLike):
    """Save a session's cell flags and seed."""
    write_snapshot(session.snapshot(), path)
    logger.info("Saved %dx%d session to %s", session.width, session.height, path)


def load_session(path: PathLike) -> HullSession:
    """
    Create a session sized from a saved file and restore it.

    Raises:
        FileNotFoundError: If the file does not exist
        MalformedSnapshotError: If the file has no usable dimensions
    """
    snapshot = read_snapshot(path)
    if snapshot.width <= 0 or snapshot.height <= 0:
        raise MalformedSnapshotError(f"{path}: missing grid dimensions")

    session = HullSession(snapshot.width, snapshot.height)
    session.restore(snapshot)
    logger.info("Loaded %dx%d session from %s", snapshot.width, snapshot.height, path)
    return session


def load_into(session: HullSession, path: PathLike) -> bool:
    """
    Restore a saved file into an existing session.

    A missing file leaves the session untouched. A bitfield for a grid
    of a different size is ignored by HullSession.restore.

    Returns:
        True if a file was found and applied
    """
    if not Path(path).exists():
        logger.info("No saved session at %s", path)
        return False

    session.restore(read_snapshot(path))
    logger.info("Restored session from %s", path)
    return True
