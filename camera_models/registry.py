import logging
import threading
from types import MappingProxyType
from typing import Mapping, Optional, Sequence

from .types import (CAMERA_MODELS, CameraModel, INVALID_CAMERA_MODEL_ID, INVALID_CAMERA_MODEL_NAME,
                    build_model_tables, is_model_id)

logger = logging.getLogger(__name__)

# Built once by initialize_registry(), read-only afterwards
_NAME_TO_ID: Optional[Mapping[str, int]] = None
_ID_TO_NAME: Optional[Mapping[int, str]] = None
_REGISTRY_LOCK = threading.Lock()


def _build_tables(models: Sequence[CameraModel]):
    models_by_id, models_by_name = build_model_tables(models)
    name_to_id = {name: model.model_id for name, model in models_by_name.items()}
    id_to_name = {model_id: model.model_name for model_id, model in models_by_id.items()}
    return MappingProxyType(name_to_id), MappingProxyType(id_to_name)


def initialize_registry() -> None:
    """Build the name <-> id lookup tables.

    Safe to call from several threads and more than once; the tables are only
    built on the first call. All query functions call this lazily, calling it
    explicitly at startup just moves the cost out of the first query.
    """
    global _NAME_TO_ID, _ID_TO_NAME
    if _ID_TO_NAME is not None:
        return

    with _REGISTRY_LOCK:
        if _ID_TO_NAME is not None:
            return
        name_to_id, id_to_name = _build_tables(CAMERA_MODELS)
        # Publish id_to_name last, it is the "initialized" flag
        _NAME_TO_ID = name_to_id
        _ID_TO_NAME = id_to_name
        logger.debug("Camera model registry initialized with %d models", len(id_to_name))


def get_name_to_id_table() -> Mapping[str, int]:
    """Returns the read-only name -> id table."""
    initialize_registry()
    return _NAME_TO_ID


def get_id_to_name_table() -> Mapping[int, str]:
    """Returns the read-only id -> name table."""
    initialize_registry()
    return _ID_TO_NAME


def camera_model_name_to_id(model_name: str) -> int:
    """Convert a camera model name to its ID.

    Args:
        model_name: Exact (case-sensitive) camera model name, e.g. "PINHOLE"

    Returns:
        The model ID, or INVALID_CAMERA_MODEL_ID if the name is unknown
    """
    try:
        return get_name_to_id_table().get(model_name, INVALID_CAMERA_MODEL_ID)
    except TypeError: # unhashable input
        return INVALID_CAMERA_MODEL_ID


def camera_model_id_to_name(model_id: int) -> str:
    """Convert a camera model ID to its name.

    Args:
        model_id: Numeric camera model ID

    Returns:
        The model name, or INVALID_CAMERA_MODEL_NAME if the ID is unknown
    """
    if not is_model_id(model_id):
        return INVALID_CAMERA_MODEL_NAME
    return get_id_to_name_table().get(model_id, INVALID_CAMERA_MODEL_NAME)


def exists_camera_model_with_name(model_name: str) -> bool:
    return camera_model_name_to_id(model_name) != INVALID_CAMERA_MODEL_ID


def exists_camera_model_with_id(model_id: int) -> bool:
    return camera_model_id_to_name(model_id) != INVALID_CAMERA_MODEL_NAME
