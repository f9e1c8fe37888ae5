#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdinline/utils/references.py
"""Loading reference definitions from YAML or JSON files.

The block-level pass normally collects reference definitions from the
document itself. For standalone use, the command line tool accepts a file
holding a mapping from identifier to either a URL string or a mapping with
``url`` and optional ``title`` keys::

    id1:
      url: url 1
      title: title 1
    id2: url 2

"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from mdinline.constants import REFERENCE_FILE_EXTENSIONS, ReferenceFileFormat
from mdinline.context import LinkTable
from mdinline.exceptions import FileNotFoundError, MalformedFileError, ReferenceDefinitionError

logger = logging.getLogger(__name__)


def _detect_format(path: Path) -> ReferenceFileFormat:
    # JSON is a subset of YAML, so unknown extensions go through the YAML loader
    return REFERENCE_FILE_EXTENSIONS.get(path.suffix.lower(), "yaml")


def load_link_table(path: str | Path) -> LinkTable:
    """Read reference definitions from a YAML or JSON file.

    Parameters
    ----------
    path : str or Path
        File containing a top-level mapping of identifiers to definitions

    Returns
    -------
    LinkTable
        The loaded definitions

    Raises
    ------
    FileNotFoundError
        If the file does not exist
    MalformedFileError
        If the file cannot be read or parsed, or its entries are invalid

    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(str(path))

    file_format = _detect_format(path)
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MalformedFileError(f"Cannot read reference definitions: {e}", str(path), e) from e

    try:
        data: Any = json.loads(content) if file_format == "json" else yaml.safe_load(content)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise MalformedFileError(f"Invalid {file_format.upper()} in reference definitions: {e}", str(path), e) from e

    if data is None:
        logger.info("Reference definition file %s is empty", path)
        return LinkTable()
    if not isinstance(data, dict):
        raise MalformedFileError(
            f"Reference definitions must be a mapping, got {type(data).__name__}", file_path=str(path)
        )

    try:
        table = LinkTable(data)
    except ReferenceDefinitionError as e:
        raise MalformedFileError(e.message, str(path), e) from e

    logger.debug("Loaded %d reference definitions from %s", len(table), path)
    return table
