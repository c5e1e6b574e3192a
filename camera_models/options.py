class BogusParamsOptions:
    """Thresholds used to decide whether camera parameters are bogus.

    The defaults match the ones COLMAP uses when filtering cameras after
    bundle adjustment.
    """

    __slots__ = ['min_focal_length_ratio', 'max_focal_length_ratio', 'max_extra_param']

    min_focal_length_ratio: float
    max_focal_length_ratio: float
    max_extra_param: float

    def __init__(self, min_focal_length_ratio: float = 0.1, max_focal_length_ratio: float = 10.0,
                 max_extra_param: float = 1.0):
        """
        Args:
            min_focal_length_ratio: Minimum focal length / max(width, height).
            max_focal_length_ratio: Maximum focal length / max(width, height).
            max_extra_param: Maximum absolute value of any distortion parameter.

        Raises:
            ValueError: If the ratios are negative or inverted, or max_extra_param is negative.
        """
        if min_focal_length_ratio < 0:
            raise ValueError("min_focal_length_ratio must be non-negative.")
        if max_focal_length_ratio < min_focal_length_ratio:
            raise ValueError(
                f"max_focal_length_ratio ({max_focal_length_ratio}) must not be smaller "
                f"than min_focal_length_ratio ({min_focal_length_ratio})."
            )
        if max_extra_param < 0:
            raise ValueError("max_extra_param must be non-negative.")

        self.min_focal_length_ratio = float(min_focal_length_ratio)
        self.max_focal_length_ratio = float(max_focal_length_ratio)
        self.max_extra_param = float(max_extra_param)

    def as_args(self):
        """Returns the thresholds in the order camera_model_has_bogus_params expects them."""
        return self.min_focal_length_ratio, self.max_focal_length_ratio, self.max_extra_param

    def __repr__(self) -> str:
        return (f"BogusParamsOptions(min_focal_length_ratio={self.min_focal_length_ratio}, "
                f"max_focal_length_ratio={self.max_focal_length_ratio}, "
                f"max_extra_param={self.max_extra_param})")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BogusParamsOptions):
            return NotImplemented
        return self.as_args() == other.as_args()
