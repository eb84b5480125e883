"""Tests for the error handling middleware."""
from pattern_gallery.domain.vehicle import UnsupportedVehicleError
from pattern_gallery.infrastructure.error import (
    ExceptionContext,
    build_error_response,
    with_error_handling,
)


def test_successful_handler_returns_result_and_zero():
    @with_error_handling("test.ok")
    def handler():
        return {"lines": ["ok"]}

    assert handler() == ({"lines": ["ok"]}, 0)


def test_domain_error_becomes_payload():
    @with_error_handling("test.domain")
    def handler():
        raise UnsupportedVehicleError("boat")

    payload, exit_code = handler()

    assert exit_code == 1
    assert payload["error"] == "UnsupportedVehicleError"
    assert payload["message"] == "Vehicle type not supported"


def test_unexpected_error_is_internal():
    @with_error_handling("test.crash")
    def handler():
        raise RuntimeError("boom")

    payload, exit_code = handler()

    assert exit_code == 1
    assert payload == {"error": "InternalError", "message": "boom", "details": None}


def test_error_response_carries_context():
    context = ExceptionContext.for_operation("vehicles.create", tag="boat")

    response = build_error_response(UnsupportedVehicleError("boat"), context)

    assert response.context["operation"] == "vehicles.create"
    assert response.context["layer"] == "interface"
    assert response.context["tag"] == "boat"


def test_context_splits_operation_into_resource_and_action():
    context = ExceptionContext.for_operation("payments.pay", handler="handle_make_payment")

    data = context.to_dict()

    assert data["resource"] == "payments"
    assert data["action"] == "pay"
    assert data["handler"] == "handle_make_payment"
    assert "thread_id" not in data


def test_context_without_action():
    assert ExceptionContext("scenarios").action is None
