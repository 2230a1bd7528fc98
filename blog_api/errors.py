class BlogApiError(Exception):
    status_code = 500

    def __init__(self, error: str, message: str | None = None):
        super().__init__(message or error)
        self.error = error
        self.message = message or error

    def to_dict(self):
        return {"error": self.error, "message": self.message}


class InvalidRequestError(BlogApiError):
    status_code = 400


class AuthenticationError(BlogApiError):
    status_code = 401


class NotFoundError(BlogApiError):
    status_code = 404


class ConflictError(BlogApiError):
    status_code = 409
