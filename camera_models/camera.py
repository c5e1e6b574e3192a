import logging
import numpy as np
from typing import Optional, Union, List
from numpy.typing import NDArray

from .types import CAMERA_MODEL_NAMES, CameraModel
from .options import BogusParamsOptions
from .dispatch import camera_model_initialize_params, camera_model_verify_params

logger = logging.getLogger(__name__)


class Camera:
    """
    A camera with intrinsic parameters for one of the registered camera models.
    Slot lookups (focal length, principal point, distortion) go through the
    model's index sets, so no per-model branches are needed here.
    """

    id: int
    model: str
    width: int
    height: int
    params: NDArray[np.float64] # Shape (N,) where N is the number of parameters

    _calibration_matrix: Optional[np.ndarray] = None # Cache for K matrix

    def __init__(self, id: int, model: str, width: int, height: int, params: Union[NDArray[np.float64], List[float]]):
        """
        Initializes a Camera instance.

        Args:
            id: Unique camera identifier.
            model: Camera model name (must be a registered model name).
            width: Image width in pixels.
            height: Image height in pixels.
            params: Numpy array or list of camera intrinsic parameters.

        Raises:
            ValueError: If the model name is unknown, the image size is not
                        positive or there are too few parameters for the model.
        """
        if model not in CAMERA_MODEL_NAMES:
            raise ValueError(f"Unknown camera model name: {model}")
        if width <= 0 or height <= 0:
            raise ValueError("Camera width and height must be positive integers.")

        expected_params = CAMERA_MODEL_NAMES[model].num_params
        params_array = np.asarray(params, dtype=np.float64).reshape(-1)

        if len(params_array) < expected_params:
            raise ValueError(
                f"Camera model '{model}' expects {expected_params} parameters, "
                f"but received array of length {len(params_array)}."
            )
        if len(params_array) > expected_params and np.any(params_array[expected_params:] != 0.0):
            # Only warn if non-zero extra params exist, could be padding
            logger.warning("Camera model '%s' expects %d parameters, but %d were provided. Ignoring extra values.",
                           model, expected_params, len(params_array))

        self.id = id
        self.model = model
        self.width = width
        self.height = height
        self.params = params_array[:expected_params].copy()
        self._calibration_matrix = None # Invalidate cache

    @classmethod
    def from_focal_length(cls, id: int, model: str, width: int, height: int, focal_length: float) -> 'Camera':
        """Creates a camera with default parameters for the given focal length.

        The principal point is put at the image center and all distortion
        parameters are zero.
        """
        if model not in CAMERA_MODEL_NAMES:
            raise ValueError(f"Unknown camera model name: {model}")
        params = camera_model_initialize_params(CAMERA_MODEL_NAMES[model].model_id, focal_length, width, height)
        return cls(id, model, width, height, params)

    @property
    def camera_model(self) -> CameraModel:
        return CAMERA_MODEL_NAMES[self.model]

    def get_model_id(self) -> int:
        """Returns the numeric ID of the camera model."""
        return self.camera_model.model_id

    def get_num_params(self) -> int:
        """Returns the number of parameters for this camera model."""
        return self.camera_model.num_params

    def get_params_info(self) -> str:
        return self.camera_model.params_info

    @property
    def focal_length(self) -> float:
        """Mean of the focal length parameters."""
        return float(np.mean(self.params[list(self.camera_model.focal_length_idxs)]))

    @property
    def focal_length_x(self) -> float:
        return float(self.params[self.camera_model.focal_length_idxs[0]])

    @property
    def focal_length_y(self) -> float:
        # Single focal length models use the same slot for x and y
        return float(self.params[self.camera_model.focal_length_idxs[-1]])

    @property
    def principal_point_x(self) -> float:
        return float(self.params[self.camera_model.principal_point_idxs[0]])

    @property
    def principal_point_y(self) -> float:
        return float(self.params[self.camera_model.principal_point_idxs[1]])

    def get_calibration_matrix(self) -> np.ndarray:
        """
        Calculates and returns the 3x3 camera calibration matrix (K).
        Caches the result for efficiency.
        """
        if self._calibration_matrix is not None:
            return self._calibration_matrix.copy()

        K = np.eye(3, dtype=np.float64)
        K[0, 0] = self.focal_length_x
        K[1, 1] = self.focal_length_y
        K[0, 2] = self.principal_point_x
        K[1, 2] = self.principal_point_y

        self._calibration_matrix = K
        return K.copy() # Return copy

    def get_distortion_params(self) -> np.ndarray:
        """
        Returns the distortion (extra) parameters as a NumPy array.
        The array is empty if the model has no distortion parameters.
        """
        return self.params[list(self.camera_model.extra_params_idxs)]

    def has_distortion(self) -> bool:
        """Checks if the camera model includes distortion parameters."""
        return len(self.camera_model.extra_params_idxs) > 0

    def verify_params(self) -> bool:
        return camera_model_verify_params(self.get_model_id(), self.params)

    def has_bogus_params(self, options: Optional[BogusParamsOptions] = None) -> bool:
        """
        Checks whether the parameters are implausible for a real camera.

        Args:
            options: Thresholds to use, defaults to BogusParamsOptions().
        """
        if options is None:
            options = BogusParamsOptions()
        return self.camera_model.has_bogus_params(self.params, self.width, self.height, *options.as_args())

    def __repr__(self) -> str:
        params_str = np.array2string(self.params, precision=3, separator=', ', suppress_small=True)
        return (f"Camera(id={self.id}, model='{self.model}', "
                f"width={self.width}, height={self.height}, "
                f"params={params_str})")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Camera):
            return NotImplemented
        return self.id == other.id and \
               self.model == other.model and \
               self.width == other.width and \
               self.height == other.height and \
               np.array_equal(self.params, other.params)

    def __hash__(self) -> int:
        # Adding 0.0 maps -0.0 to 0.0 so that equal params hash equally
        return hash((self.id, self.model, self.width, self.height, (self.params + 0.0).tobytes()))
