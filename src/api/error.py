from libs.result import Error


class ClientError(Exception):
    """
    Raised by routes to turn a failed Result into an HTTP error response

    Body: {"error": <message>, "code": <code>}
    """

    def __init__(self, error: Error, status_code: int = 400):
        super().__init__(error.message)
        self.error = error
        self.status_code = status_code

    def to_body(self, expose_details: bool = False) -> dict:
        body = {"error": self.error.message, "code": self.error.code}
        if expose_details and self.error.reason:
            body["reason"] = self.error.reason
        return body


ERROR_STATUS = {
    "INVALID_REFERENCE": 400,
    "INVALID_INVOICE": 400,
    "VALIDATION_ERROR": 400,
    "INVOICE_NOT_FOUND": 404,
    "PRODUCT_NOT_FOUND": 404,
    "CUSTOMER_NOT_FOUND": 404,
    "PRODUCT_NAME_EXISTS": 409,
    "PRODUCT_IN_USE": 409,
    "CUSTOMER_MOBILE_EXISTS": 409,
    "CUSTOMER_HAS_INVOICES": 409,
}


def client_error(error: Error) -> ClientError:
    """Map a use case Error onto its HTTP status; unknown codes are server side failures"""
    return ClientError(error, status_code=ERROR_STATUS.get(error.code, 500))
