# -*- coding: utf-8 -*-
"""
Single-slot project persistence.

The whole Project is written as one JSON record under a fixed key.
Saving overwrites the previous record; there is no versioning or merge.
"""
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from core.data_models import Project
from core.env_loader import get_data_dir
from core.errors import CorruptDataError, NotFoundError, StorageError
from core.text_utils import _safe_name

STORAGE_KEY = "hollywood_prompt_project"

logger = logging.getLogger(__name__)


def _slot_path(data_dir: Optional[Path], key: str) -> Path:
    return Path(data_dir or get_data_dir()) / f"{_safe_name(key)}.json"


def save_project(proj: Project, data_dir: Optional[Path] = None, key: str = STORAGE_KEY) -> Path:
    f = _slot_path(data_dir, key)
    payload = proj.model_dump_json(by_alias=True, indent=2)
    tmp = None
    try:
        f.parent.mkdir(parents=True, exist_ok=True)
        # Write beside the record, then swap it in: a failed write keeps the previous save
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", dir=f.parent, prefix=f".{f.stem}.", suffix=".tmp", delete=False
        ) as fp:
            tmp = Path(fp.name)
            fp.write(payload)
        os.replace(tmp, f)
    except OSError as e:
        logger.error("Failed to save project to %s: %s", f, e)
        if tmp is not None:
            tmp.unlink(missing_ok=True)
        raise StorageError("Could not save the project to local storage.") from e
    logger.info("Saved project %r to %s", proj.name, f)
    return f


def load_project(data_dir: Optional[Path] = None, key: str = STORAGE_KEY) -> Project:
    f = _slot_path(data_dir, key)
    try:
        with f.open("r", encoding="utf-8") as fp:
            raw = fp.read()
    except FileNotFoundError as e:
        raise NotFoundError("No saved project found in local storage.") from e
    except UnicodeDecodeError as e:
        logger.warning("Saved project at %s is not valid UTF-8", f)
        raise CorruptDataError("Could not load the project. The saved data might be corrupted.") from e
    except OSError as e:
        logger.error("Failed to read project from %s: %s", f, e)
        raise StorageError("Could not read the project from local storage.") from e

    try:
        proj = Project.model_validate_json(raw)
    except ValidationError as e:
        logger.warning("Saved project at %s does not match the project shape: %s", f, e)
        raise CorruptDataError("Could not load the project. The saved data might be corrupted.") from e
    logger.info("Loaded project %r from %s", proj.name, f)
    return proj
