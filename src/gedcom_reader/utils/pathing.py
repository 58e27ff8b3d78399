# src/gedcom_reader/utils/pathing.py

from __future__ import annotations

from pathlib import Path
from typing import Union


# This file lives at <project_root>/src/gedcom_reader/utils/pathing.py
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


def project_root() -> Path:
    """
    Return the directory that holds src/, tests/, config/ and mock_files/.
    """
    return _PROJECT_ROOT


def resolve_project_path(relative: Union[str, Path]) -> Path:
    """
    Resolve a path relative to the project root.

        resolve_project_path("mock_files/family.ged")
    """
    return project_root() / Path(relative)


def mock_file_path(filename: Union[str, Path]) -> Path:
    """
    Return the absolute path to a sample file under mock_files/.
    """
    return resolve_project_path(Path("mock_files") / filename)
