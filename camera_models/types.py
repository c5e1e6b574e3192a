import numbers
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Sequence, Tuple

# A special value representing an invalid / unknown camera model
INVALID_CAMERA_MODEL_ID = -1
INVALID_CAMERA_MODEL_NAME = "INVALID_CAMERA_MODEL"

class CameraModelType(Enum):
    """Enumeration of camera model types supported by COLMAP."""
    SIMPLE_PINHOLE = 0
    PINHOLE = 1
    SIMPLE_RADIAL = 2
    RADIAL = 3
    OPENCV = 4
    OPENCV_FISHEYE = 5
    FULL_OPENCV = 6
    FOV = 7
    SIMPLE_RADIAL_FISHEYE = 8
    RADIAL_FISHEYE = 9
    THIN_PRISM_FISHEYE = 10

class CameraModel:
    """Camera model information.

    Static description of one camera model: its id and name, how many
    parameters it takes and which parameter slots hold the focal length(s),
    the principal point and the extra (distortion) coefficients.
    Instances are immutable.
    """

    __slots__ = ['model_id', 'model_name', 'num_params', 'params_info',
                 'focal_length_idxs', 'principal_point_idxs', 'extra_params_idxs']

    model_id: int
    model_name: str
    num_params: int
    params_info: str
    focal_length_idxs: Tuple[int, ...]
    principal_point_idxs: Tuple[int, ...]
    extra_params_idxs: Tuple[int, ...]

    def __init__(self, model_id: int, model_name: str, num_params: int, params_info: str,
                 focal_length_idxs: Sequence[int], principal_point_idxs: Sequence[int],
                 extra_params_idxs: Sequence[int]):
        """Initialize a camera model.

        Args:
            model_id: Numeric ID of the camera model
            model_name: String name of the camera model
            num_params: Number of parameters for this model
            params_info: Human readable layout of the parameters, e.g. "f, cx, cy"
            focal_length_idxs: Parameter indices of the focal length(s)
            principal_point_idxs: Parameter indices of the principal point (x, y)
            extra_params_idxs: Parameter indices of the distortion coefficients

        Raises:
            ValueError: If the index sets overlap, fall outside the parameter
                        vector or the principal point does not have two indices.
        """
        focal_length_idxs = tuple(int(i) for i in focal_length_idxs)
        principal_point_idxs = tuple(int(i) for i in principal_point_idxs)
        extra_params_idxs = tuple(int(i) for i in extra_params_idxs)

        if num_params < 0:
            raise ValueError(f"Camera model '{model_name}' has a negative number of parameters.")
        if len(principal_point_idxs) != 2:
            raise ValueError(f"Camera model '{model_name}' must have exactly 2 principal point indices.")

        all_idxs = focal_length_idxs + principal_point_idxs + extra_params_idxs
        if len(set(all_idxs)) != len(all_idxs):
            raise ValueError(f"Camera model '{model_name}' has overlapping parameter indices.")
        if any(idx < 0 or idx >= num_params for idx in all_idxs):
            raise ValueError(f"Camera model '{model_name}' has parameter indices outside [0, {num_params}).")

        object.__setattr__(self, 'model_id', model_id)
        object.__setattr__(self, 'model_name', model_name)
        object.__setattr__(self, 'num_params', num_params)
        object.__setattr__(self, 'params_info', params_info)
        object.__setattr__(self, 'focal_length_idxs', focal_length_idxs)
        object.__setattr__(self, 'principal_point_idxs', principal_point_idxs)
        object.__setattr__(self, 'extra_params_idxs', extra_params_idxs)

    def __setattr__(self, name, value):
        raise AttributeError(f"CameraModel is immutable, cannot set '{name}'")

    def __delattr__(self, name):
        raise AttributeError(f"CameraModel is immutable, cannot delete '{name}'")

    def has_bogus_params(self, params: Sequence[float], width: int, height: int,
                         min_focal_length_ratio: float, max_focal_length_ratio: float,
                         max_extra_param: float) -> bool:
        """Check whether the parameters are unlikely to belong to a real camera.

        A focal length is bogus if its ratio to the larger image side is outside
        [min_focal_length_ratio, max_focal_length_ratio]. An extra parameter is
        bogus if its magnitude exceeds max_extra_param.
        """
        max_size = float(max(width, height))
        if max_size <= 0:
            # No image to relate the focal length to
            return True

        for idx in self.focal_length_idxs:
            focal_length_ratio = float(params[idx]) / max_size
            if focal_length_ratio < min_focal_length_ratio or focal_length_ratio > max_focal_length_ratio:
                return True

        for idx in self.extra_params_idxs:
            if abs(params[idx]) > max_extra_param:
                return True

        return False

    def __repr__(self) -> str:
        return (f"CameraModel(model_id={self.model_id}, model_name='{self.model_name}', "
                f"num_params={self.num_params}, params_info='{self.params_info}')")


def _single_focal_model(model_type: CameraModelType, params_info: str) -> CameraModel:
    # f, cx, cy, extra...
    num_params = len(params_info.split(", "))
    return CameraModel(model_type.value, model_type.name, num_params, params_info,
                       (0,), (1, 2), range(3, num_params))

def _two_focal_model(model_type: CameraModelType, params_info: str) -> CameraModel:
    # fx, fy, cx, cy, extra...
    num_params = len(params_info.split(", "))
    return CameraModel(model_type.value, model_type.name, num_params, params_info,
                       (0, 1), (2, 3), range(4, num_params))

CAMERA_MODELS = [
    _single_focal_model(CameraModelType.SIMPLE_PINHOLE, "f, cx, cy"),
    _two_focal_model(CameraModelType.PINHOLE, "fx, fy, cx, cy"),
    _single_focal_model(CameraModelType.SIMPLE_RADIAL, "f, cx, cy, k"),
    _single_focal_model(CameraModelType.RADIAL, "f, cx, cy, k1, k2"),
    _two_focal_model(CameraModelType.OPENCV, "fx, fy, cx, cy, k1, k2, p1, p2"),
    _two_focal_model(CameraModelType.OPENCV_FISHEYE, "fx, fy, cx, cy, k1, k2, k3, k4"),
    _two_focal_model(CameraModelType.FULL_OPENCV, "fx, fy, cx, cy, k1, k2, p1, p2, k3, k4, k5, k6"),
    _two_focal_model(CameraModelType.FOV, "fx, fy, cx, cy, omega"),
    _single_focal_model(CameraModelType.SIMPLE_RADIAL_FISHEYE, "f, cx, cy, k"),
    _single_focal_model(CameraModelType.RADIAL_FISHEYE, "f, cx, cy, k1, k2"),
    _two_focal_model(CameraModelType.THIN_PRISM_FISHEYE, "fx, fy, cx, cy, k1, k2, p1, p2, k3, k4, sx1, sy1"),
]

def is_model_id(value) -> bool:
    """True for integer values (numpy integers included), False for bools, floats and others."""
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def build_model_tables(models: Sequence[CameraModel]) -> Tuple[Mapping[int, CameraModel], Mapping[str, CameraModel]]:
    """Builds read-only id -> model and name -> model tables.

    Raises:
        ValueError: On a duplicate name or id, or a model using the invalid ID.
    """
    models_by_id = {}
    models_by_name = {}
    for model in models:
        if model.model_name in models_by_name:
            raise ValueError(f"Duplicate camera model name: {model.model_name}")
        if model.model_id in models_by_id:
            raise ValueError(f"Duplicate camera model ID: {model.model_id}")
        if model.model_id == INVALID_CAMERA_MODEL_ID:
            raise ValueError(f"Camera model '{model.model_name}' uses the reserved invalid ID.")
        models_by_id[model.model_id] = model
        models_by_name[model.model_name] = model
    return MappingProxyType(models_by_id), MappingProxyType(models_by_name)


MAX_CAMERA_PARAMS = max(model.num_params for model in CAMERA_MODELS)
CAMERA_MODEL_IDS, CAMERA_MODEL_NAMES = build_model_tables(CAMERA_MODELS)
