ALLOCATION_MESSAGE = "Total asset allocation must equal 100%."


class ProjectionError(ValueError):
    """Base class for inputs the projection engine refuses to run."""


class AllocationError(ProjectionError):
    def __init__(self, total: float):
        super().__init__(ALLOCATION_MESSAGE)
        self.total = total


class DegenerateRateError(ProjectionError):
    def __init__(self, field: str, value: float, reason: str):
        super().__init__(f"{field}={value!r}: {reason}")
        self.field = field
        self.value = value


class HorizonError(ProjectionError):
    pass
