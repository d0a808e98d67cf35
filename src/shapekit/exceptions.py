"""Exception hierarchy for Shapekit."""


class ShapekitError(Exception):
    """Base exception for all Shapekit errors."""

    pass


class ConfigurationError(ShapekitError):
    """Errors related to engine configuration."""

    pass


class InvalidConfigurationError(ConfigurationError):
    """A tolerance or limit was outside its valid range."""

    def __init__(self, parameter: str, value: float, reason: str) -> None:
        self.parameter = parameter
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {parameter} {value!r}: {reason}")


class IterationError(ShapekitError):
    """Errors related to segment stream traversal."""

    pass


class StreamExhaustedError(IterationError):
    """Current segment requested after the stream ran out of segments."""

    def __init__(self, stream_name: str) -> None:
        self.stream_name = stream_name
        super().__init__(f"{stream_name} is exhausted: no current segment")


class PathStateError(IterationError):
    """Segment appended to a path in an invalid order."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class GeometryError(ShapekitError):
    """Errors in geometric calculations."""

    pass


class AmbiguousGeometryError(GeometryError):
    """A three-way containment result was used where a boolean was expected."""

    def __init__(self, outcome: str) -> None:
        self.outcome = outcome
        super().__init__(
            f"Containment.{outcome} cannot be used as a boolean; "
            "compare against Containment members explicitly"
        )
