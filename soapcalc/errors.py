class BaseFillNotSupported(ValueError):
    """Raised when base auto-fill is requested for a cold-process formulation."""

    message = (
        "Cold-process soap: adjust the vegetable oil percentages manually. "
        "The NaOH panel shows the resulting lye."
    )

    def __init__(self, message: str = ""):
        super().__init__(message or self.message)
