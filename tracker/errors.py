"""Error types for the study tracker."""


class MonthOutOfRangeError(IndexError):
    """Raised when a plan month is requested outside the plan's length.

    Month numbers come from the clamped elapsed-month computation, so this
    indicates a logic error rather than bad user input.
    """

    def __init__(self, month: int, plan_length: int):
        self.month = month
        self.plan_length = plan_length
        self.message = f"Month {month} is outside the plan (1-{plan_length})"
        super().__init__(self.message)
