"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class PlaneStoreError(Exception):
    """Base class for PLANESTORE errors."""


class MalformedCoordsError(PlaneStoreError, ValueError):
    """Raised when a coordinate is given an invalid axis name or index."""

    def __init__(self, axis: object, index: object) -> None:
        super().__init__(
            f"Invalid position {index!r} for axis {axis!r}: "
            "indices must be non-negative integers."
        )
        self.axis = axis
        self.index = index


# ============================================================================
#                   Pixel access errors
# ============================================================================


class OutOfBoundsError(PlaneStoreError, IndexError):
    """Raised when a pixel query addresses a location outside the image."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(
            f"Pixel ({x}, {y}) is outside the {width}x{height} image."
        )
        self.x = x
        self.y = y
        self.width = width
        self.height = height


class InvalidComponentError(PlaneStoreError, IndexError):
    """Raised when a component index is outside the image's component range."""

    def __init__(self, component: int, num_components: int) -> None:
        super().__init__(
            f"Component {component} is invalid for an image with "
            f"{num_components} component(s)."
        )
        self.component = component
        self.num_components = num_components
