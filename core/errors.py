"""Typed failures raised while building or resolving a map generation."""


class ConfigurationError(ValueError):
    """Invalid parameters of a generator, transformer or step."""


class AttributeUnknownError(ValueError):
    """A step references an attribute that no earlier step created."""

    def __init__(self, name: str, step_index: int) -> None:
        super().__init__(f"Step {step_index} references unknown attribute '{name}'")
        self.name = name
        self.step_index = step_index


class AttributeDuplicateError(ValueError):
    """An attribute with the same name already exists."""

    def __init__(self, name: str, step_index: int | None = None) -> None:
        if step_index is None:
            message = f"Attribute '{name}' already exists"
        else:
            message = f"Step {step_index} creates attribute '{name}' a second time"
        super().__init__(message)
        self.name = name
        self.step_index = step_index
