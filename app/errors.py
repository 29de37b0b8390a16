class DepthChartError(Exception):
    """Base class for errors reported back to the user at the request boundary."""
    status_code = 400

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ValidationError(DepthChartError):
    status_code = 400


class NotFoundError(DepthChartError):
    status_code = 404


class PermissionDenied(DepthChartError):
    status_code = 403
