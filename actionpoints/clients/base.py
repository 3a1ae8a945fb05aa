from __future__ import annotations


class ActionablePointsError(RuntimeError):
    pass


class ActionablePointsHTTPError(ActionablePointsError):
    """Non-2xx response. The body is never read, only the status code is kept."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"HTTP error! status: {status_code}")


__all__ = ['ActionablePointsError', 'ActionablePointsHTTPError']
