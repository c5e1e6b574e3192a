__version__ = "0.1.0"

__all__ = [
    # Core classes
    "Camera",
    "BogusParamsOptions",
    # Types & Constants
    "CameraModel",
    "CameraModelType",
    "ParamsCheck",
    "CAMERA_MODELS",
    "CAMERA_MODEL_IDS",
    "CAMERA_MODEL_NAMES",
    "MAX_CAMERA_PARAMS",
    "INVALID_CAMERA_MODEL_ID",
    "INVALID_CAMERA_MODEL_NAME",
    "CAMERA_MODEL_DOES_NOT_EXIST",
    # Registry
    "initialize_registry",
    "camera_model_name_to_id",
    "camera_model_id_to_name",
    "exists_camera_model_with_name",
    "exists_camera_model_with_id",
    # Model operations
    "camera_model_num_params",
    "camera_model_params_info",
    "camera_model_focal_length_idxs",
    "camera_model_principal_point_idxs",
    "camera_model_extra_params_idxs",
    "camera_model_initialize_params",
    "camera_model_verify_params",
    "camera_model_has_bogus_params",
    "camera_model_check_params",
]

from .camera import Camera
from .options import BogusParamsOptions
from .types import (
    CameraModel,
    CameraModelType,
    CAMERA_MODELS,
    CAMERA_MODEL_IDS,
    CAMERA_MODEL_NAMES,
    MAX_CAMERA_PARAMS,
    INVALID_CAMERA_MODEL_ID,
    INVALID_CAMERA_MODEL_NAME,
)
from .registry import (
    initialize_registry,
    camera_model_name_to_id,
    camera_model_id_to_name,
    exists_camera_model_with_name,
    exists_camera_model_with_id,
)
from .dispatch import (
    ParamsCheck,
    CAMERA_MODEL_DOES_NOT_EXIST,
    camera_model_num_params,
    camera_model_params_info,
    camera_model_focal_length_idxs,
    camera_model_principal_point_idxs,
    camera_model_extra_params_idxs,
    camera_model_initialize_params,
    camera_model_verify_params,
    camera_model_has_bogus_params,
    camera_model_check_params,
)
