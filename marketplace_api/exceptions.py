"""Domain errors mapped to HTTP responses in middleware.error_handler"""


class InvalidRequestError(ValueError):
    """Request is missing fields or names an unknown notification type (400)"""


class DeliveryError(RuntimeError):
    """The email API rejected the message or could not be reached (500)"""
