class AskAIError(Exception):
    """Base for everything the service raises on purpose."""


class ClientError(AskAIError):
    """The caller sent a bad request."""


class MissingParameter(ClientError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Missing required query parameter: {name}")


class InvalidParameter(ClientError):
    def __init__(self, name: str, value: str) -> None:
        self.name = name
        self.value = value
        super().__init__(f"Query parameter {name}={value!r} is not an integer")


class UpstreamFailure(AskAIError):
    """The generation provider errored, timed out, or rejected the request."""
