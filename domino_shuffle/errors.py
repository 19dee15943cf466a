"""
Exceptions raised by the shuffling engine.
"""


class InvariantViolation(RuntimeError):
    """The tiling stopped being a perfect cover of the diamond.

    Raised when the create phase leaves holes that do not group into 2x2
    blocks, or when dominoes overlap or leave the diamond frame. This is
    always a bug upstream of the check and the step that hit it is aborted.
    """


class BiasOutOfRange(ValueError):
    """A bias function returned something outside [0, 1].

    Never raised by the engine itself: the value is clamped and the event is
    logged and recorded on the bias wrapper. Kept as an exception type so
    callers can turn the report into an error (see OrientationBias.strict).
    """

    def __init__(self, value: float, x: int, y: int, n: int):
        self.value = value
        self.x = x
        self.y = y
        self.n = n
        super().__init__(f"Bias {value!r} at ({x}, {y}) for order {n} is outside [0, 1]")
