class PinestoreException(Exception):
    """Base exception for all Pinestore client errors."""
    pass

class RequestFailure(PinestoreException):
    """Raised when the Pinestore API answers with a non-success HTTP status."""
    def __init__(self, url: str, status: int, body: str):
        self.url = url
        self.status = status
        self.body = body
        # Keep the constructor arguments in args so the exception pickles.
        super().__init__(url, status, body)

    def __str__(self) -> str:
        return f"Pinestore API request to {self.url} failed with status {self.status}: {self.body}"
