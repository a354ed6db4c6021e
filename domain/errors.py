class WorkflowError(Exception):
    """Base class for misuse of the workflow API (never raised for user input)."""


class UnknownVariantError(WorkflowError):
    def __init__(self, name: str):
        super().__init__(f"unknown workflow variant: {name}")
        self.name = name


class UnknownFieldError(WorkflowError):
    def __init__(self, field: str):
        super().__init__(f"unknown form field: {field}")
        self.field = field
