from typing import Any


class PagSeguroError(Exception):
    """Base class for checkout failures reported by the gateway."""


class Unauthorized(PagSeguroError):
    __match_args__ = ()

    def __init__(self, message: str = "Credentials rejected by PagSeguro"):
        super().__init__(message)


class InvalidData(PagSeguroError):
    """
    Gateway rejected the payload (HTTP 400).
    ``detail`` holds the raw response body with the field-level errors.
    """
    __match_args__ = ("detail",)

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class UnknownError(PagSeguroError):
    __match_args__ = ("response",)

    def __init__(self, response: Any):
        super().__init__(f"Unexpected gateway response: {response!r}")
        self.response = response


class GatewayContractError(RuntimeError):
    """A 200 response that does not carry the expected checkout document."""
