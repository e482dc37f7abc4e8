from enum import Enum
from typing import NewType

from core.errors import ConfigurationError

# IDs
AttributeID = NewType("AttributeID", int)

BYTE_MAX = 255


class StepType(str, Enum):
    """Tags of the generation steps, shared by runtime steps and portable DTOs."""

    CREATE_ATTRIBUTE = "create_attribute"
    GENERATOR_ADD = "generator_add"
    GENERATOR_SUB = "generator_sub"
    DISTORT_ALONG_X = "distort_along_x"
    DISTORT_ALONG_Y = "distort_along_y"
    DISTORTION_2D = "distortion_2d"
    MODIFY_WITH_ATTRIBUTE = "modify_with_attribute"
    TRANSFORM_ATTRIBUTE_2D = "transform_attribute_2d"


class Generator1dType(str, Enum):
    """Tags of the 1d generators."""

    ABSOLUTE_GRADIENT = "absolute_gradient"
    GRADIENT = "gradient"
    INPUT_AS_OUTPUT = "input_as_output"
    INTERPOLATE_VECTOR = "interpolate_vector"
    NOISE = "noise"


class Generator2dType(str, Enum):
    """Tags of the 2d generators."""

    APPLY_TO_X = "apply_to_x"
    APPLY_TO_Y = "apply_to_y"
    APPLY_TO_DISTANCE = "apply_to_distance"
    INDEX = "index"
    NOISE_2D = "noise_2d"


class Transformer2dType(str, Enum):
    """Tags of the 2d transformers."""

    CLUSTERER = "clusterer"
    CONST = "const"
    OVERWRITE_IF_ABOVE = "overwrite_if_above"
    OVERWRITE_IF_BELOW = "overwrite_if_below"


def validate_byte(name: str, value: int) -> None:
    """Fail unless the value fits into a byte."""
    if not 0 <= value <= BYTE_MAX:
        raise ConfigurationError(f"The {name} must be between 0 and {BYTE_MAX}, got {value}!")
