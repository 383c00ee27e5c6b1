from productdash.error_handler import ErrorHandler
from productdash.integrations.policy.errors import (
    NotFound,
    ProductValidationError,
    RemoteConflict,
    RemoteRateLimit,
)


def test_handle_exception_returns_payload():
    eh = ErrorHandler()
    status, out = eh.handle_exception(Exception("boom"), context={"k": "v"})
    assert status == 500
    assert out["error"] == "Internal server error"
    assert "boom" in out["details"]


def test_validation_error_carries_messages():
    eh = ErrorHandler()
    status, out = eh.handle_exception(ProductValidationError(["Nama produk harus diisi"]))
    assert status == 400
    assert out == {"error": "Data produk tidak valid", "details": ["Nama produk harus diisi"]}


def test_details_omitted_when_absent():
    status, out = ErrorHandler().handle_exception(NotFound())
    assert status == 404
    assert out == {"error": "Produk tidak ditemukan"}


def test_remote_errors_keep_their_status():
    eh = ErrorHandler()
    assert eh.handle_exception(RemoteRateLimit())[0] == 429
    status, out = eh.handle_exception(RemoteConflict(details="sha mismatch", upstream_status=409))
    assert status == 409
    assert out["details"] == "sha mismatch"
