class ClassificationError(Exception):
    """Error with a message that is safe to return to the client."""

    status_code = 500
    message = "Failed to classify case"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class EmptyMessageError(ClassificationError):
    status_code = 400
    message = "Message is required"


class ClassificationFailedError(ClassificationError):
    pass
