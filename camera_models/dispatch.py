"""
Camera model operations keyed by model ID.

Every function resolves the ID through CAMERA_MODEL_IDS (a single dict lookup)
and forwards to the matching CameraModel. Unknown IDs never raise; they
produce the sentinel documented on each function. The one exception is
camera_model_initialize_params, whose callers must validate the ID first.
"""
from enum import Enum
from typing import Optional, Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

from .types import CAMERA_MODEL_IDS, CameraModel, is_model_id

CAMERA_MODEL_DOES_NOT_EXIST = "Camera model does not exist"


class ParamsCheck(Enum):
    """Outcome of camera_model_check_params."""
    UNKNOWN_MODEL = 0
    INVALID_SHAPE = 1
    BOGUS = 2
    VALID = 3


def _find_model(model_id: int) -> Optional[CameraModel]:
    if not is_model_id(model_id):
        return None
    return CAMERA_MODEL_IDS.get(model_id)


def camera_model_num_params(model_id: int) -> int:
    """Returns the number of parameters of the model, or -1 if it does not exist."""
    model = _find_model(model_id)
    if model is None:
        return -1
    return model.num_params


def camera_model_params_info(model_id: int) -> str:
    """Returns the human readable parameter layout, e.g. "fx, fy, cx, cy"."""
    model = _find_model(model_id)
    if model is None:
        return CAMERA_MODEL_DOES_NOT_EXIST
    return model.params_info


def camera_model_focal_length_idxs(model_id: int) -> Tuple[int, ...]:
    model = _find_model(model_id)
    if model is None:
        return ()
    return model.focal_length_idxs


def camera_model_principal_point_idxs(model_id: int) -> Tuple[int, ...]:
    model = _find_model(model_id)
    if model is None:
        return ()
    return model.principal_point_idxs


def camera_model_extra_params_idxs(model_id: int) -> Tuple[int, ...]:
    model = _find_model(model_id)
    if model is None:
        return ()
    return model.extra_params_idxs


def camera_model_initialize_params(model_id: int, focal_length: float, width: int, height: int,
                                   out: Optional[NDArray[np.float64]] = None) -> NDArray[np.float64]:
    """
    Creates a default parameter vector for a camera model.

    Assumes image measurements lie within [0, dim], i.e. the upper left corner
    of the image (not the center of the upper left pixel) is the (0, 0)
    coordinate, so the principal point is put at (width / 2, height / 2).
    All distortion parameters are set to zero.

    Args:
        model_id: Numeric camera model ID. Must exist, check it with
                  exists_camera_model_with_id or camera_model_verify_params first.
        focal_length: Focal length in pixels, used for every focal length slot.
        width: Image width in pixels.
        height: Image height in pixels.
        out: Optional float array of shape (num_params,) that receives the result.

    Returns:
        The parameter vector (`out` if given).

    Raises:
        KeyError: If the model ID does not exist.
        ValueError: If `out` has the wrong shape or is not a floating point array.
    """
    model = _find_model(model_id)
    if model is None:
        raise KeyError(f"Camera model ID {model_id!r} does not exist")

    if out is None:
        params = np.empty(model.num_params, dtype=np.float64)
    else:
        if out.shape != (model.num_params,):
            raise ValueError(f"out must have shape ({model.num_params},), got {out.shape}")
        if not np.issubdtype(out.dtype, np.floating):
            raise ValueError(f"out must be a floating point array, got dtype {out.dtype}")
        params = out

    for idx in model.focal_length_idxs:
        params[idx] = focal_length
    params[model.principal_point_idxs[0]] = width / 2.0
    params[model.principal_point_idxs[1]] = height / 2.0
    for idx in model.extra_params_idxs:
        params[idx] = 0

    return params


def camera_model_verify_params(model_id: int, params: Sequence[float]) -> bool:
    """Checks that the parameter vector has the length the model expects.

    Only the shape is checked, not the values. Returns False for unknown models.
    """
    model = _find_model(model_id)
    if model is None:
        return False
    try:
        return len(params) == model.num_params
    except TypeError: # no len()
        return False


def camera_model_has_bogus_params(model_id: int, params: Sequence[float], width: int, height: int,
                                  min_focal_length_ratio: float, max_focal_length_ratio: float,
                                  max_extra_param: float) -> bool:
    """
    Checks whether the camera parameters are implausible for a real camera.

    The parameter vector must have been verified with camera_model_verify_params.

    Args:
        model_id: Numeric camera model ID.
        params: Camera parameter vector.
        width: Image width in pixels.
        height: Image height in pixels.
        min_focal_length_ratio: Minimum focal length / max(width, height).
        max_focal_length_ratio: Maximum focal length / max(width, height).
        max_extra_param: Maximum absolute value of any distortion parameter.

    Returns:
        True if any focal length ratio or distortion parameter is out of range.
        False otherwise, and also False for an unknown model ID. Use
        camera_model_check_params to tell those two cases apart.
    """
    model = _find_model(model_id)
    if model is None:
        return False
    return model.has_bogus_params(params, width, height, min_focal_length_ratio,
                                  max_focal_length_ratio, max_extra_param)


def camera_model_check_params(model_id: int, params: Sequence[float], width: int, height: int,
                              min_focal_length_ratio: float, max_focal_length_ratio: float,
                              max_extra_param: float) -> ParamsCheck:
    """Like camera_model_has_bogus_params, but also reports unknown models and wrong shapes."""
    model = _find_model(model_id)
    if model is None:
        return ParamsCheck.UNKNOWN_MODEL
    if not camera_model_verify_params(model_id, params):
        return ParamsCheck.INVALID_SHAPE
    if model.has_bogus_params(params, width, height, min_focal_length_ratio,
                              max_focal_length_ratio, max_extra_param):
        return ParamsCheck.BOGUS
    return ParamsCheck.VALID
