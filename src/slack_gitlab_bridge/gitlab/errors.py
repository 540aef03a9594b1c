"""Exceptions raised by the GitLab trigger client."""


class CITriggerError(Exception):
    """GitLab refused or never answered a pipeline trigger request.

    ``status_code`` is None when the request failed before a response
    arrived (DNS, connection reset, timeout).
    """

    def __init__(self, message: str, status_code: int | None = None, body: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
