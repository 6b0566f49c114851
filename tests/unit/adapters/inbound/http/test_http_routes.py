"""Unit tests for HTTP routes."""

from unittest.mock import Mock, patch

import pytest
from fastapi import FastAPI, status
from fastapi.testclient import TestClient

from autofinance.adapters.inbound.http import routes
from autofinance.adapters.inbound.http.routes import router
from autofinance.application.dtos.financing import FinancingInput, RecommendationResult
from autofinance.application.ports.recommendation_service import RecommendationService
from autofinance.application.use_cases.calculate_financing_costs import CalculateFinancingCosts
from autofinance.application.use_cases.compare_financing_options import CompareFinancingOptions
from autofinance.application.use_cases.recommendation_messages_fr import (
    RecommendationMessagesFR,
)
from autofinance.domain.entities.financing_option import FinancingOption
from autofinance.domain.errors import RecommendationServiceError

FORM = {
    "vehicle_price": 22000,
    "down_payment": 2000,
    "duration": 4,
    "mileage": 12000,
    "interest_rate": 5.8,
    "residual_value_rate": 42,
    "monthly_payment_credit": 420,
    "monthly_payment_loa": 280,
    "monthly_payment_lld": 264,
    "preference_flexibility": "no",
    "preference_zero_constraint": "no",
    "preference_cost_optimization": "yes",
}


class StubRecommendationService(RecommendationService):
    """Recommendation service double."""

    def __init__(self, fail: bool = False) -> None:
        self._fail = fail

    def recommend(self, financing_input: FinancingInput) -> RecommendationResult:
        if self._fail:
            raise RecommendationServiceError("Empty recommendation reply")
        return RecommendationResult(
            recommendation=FinancingOption.LLD, reasoning="Vous ne voulez aucune contrainte."
        )


@pytest.fixture
def app():
    """Create FastAPI app with router."""
    app = FastAPI()
    app.include_router(router)
    return app


@pytest.fixture
def client(app):
    """Create test client."""
    return TestClient(app)


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"status": "ok"}


def test_financing_defaults(client):
    """Test default rates for the form."""
    response = client.get(
        "/financing/defaults",
        params={"vehicle_price": 22000, "down_payment": 7000, "duration": 3},
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"interest_rate": 4.8, "residual_value_rate": 50.0}


def test_financing_defaults_requires_positive_price(client):
    """Test the vehicle price query parameter is validated."""
    response = client.get("/financing/defaults", params={"vehicle_price": 0})

    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_financing_costs(client):
    """Test the three cost breakdowns are returned."""
    response = client.post("/financing/costs", json=FORM)

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert set(data) == {"credit", "loa", "lld"}
    assert data["loa"]["residual_value"] == 9240.0
    assert data["lld"]["total_cost_usage"] == 12672.0
    assert data["credit"]["total_payments"] == 22160.0


@pytest.mark.parametrize(
    "overrides",
    [
        {"duration": 0},
        {"mileage": 500},
        {"residual_value_rate": 90},
        {"down_payment": 25000},
        {"preference_flexibility": "oui"},
    ],
)
def test_invalid_form_is_rejected(client, overrides):
    """Test invalid submissions never reach the calculator."""
    response = client.post("/financing/costs", json={**FORM, **overrides})

    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_recommendation_success(client):
    """Test the recommendation endpoint returns the two-field answer."""
    with patch.object(routes, "_recommendation_service", StubRecommendationService()):
        response = client.post("/financing/recommendation", json=FORM)

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {
        "recommendation": "LLD",
        "reasoning": "Vous ne voulez aucune contrainte.",
    }


def test_recommendation_failure_returns_bad_gateway(client):
    """Test a failed call surfaces the generic retry message."""
    with patch.object(routes, "_recommendation_service", StubRecommendationService(fail=True)):
        response = client.post("/financing/recommendation", json=FORM)

    assert response.status_code == status.HTTP_502_BAD_GATEWAY
    assert response.json()["detail"] == RecommendationMessagesFR.ANALYSIS_FAILED


def test_recommendation_disabled_returns_service_unavailable(client):
    """Test the endpoint without a configured service."""
    with patch.object(routes, "_recommendation_service", None):
        response = client.post("/financing/recommendation", json=FORM)

    assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE


def test_compare_with_recommendation(client):
    """Test the comparison report merges costs and recommendation."""
    use_case = CompareFinancingOptions(CalculateFinancingCosts(), StubRecommendationService())

    with patch.object(routes, "_compare_use_case", use_case):
        response = client.post("/financing/compare", json=FORM)

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["recommendation"]["recommendation"] == "LLD"
    assert data["recommendation_error"] is None
    assert data["ranking"] == ["Crédit", "LLD", "LOA"]
    assert data["cheapest_option"] == "Crédit"
    assert len(data["monthly_evolution"]) == 48


def test_compare_with_failed_recommendation_still_returns_costs(client):
    """Test the cost comparison survives a failed recommendation."""
    use_case = CompareFinancingOptions(
        CalculateFinancingCosts(), StubRecommendationService(fail=True)
    )

    with patch.object(routes, "_compare_use_case", use_case):
        response = client.post("/financing/compare", json={**FORM, "mileage": 22000})

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["recommendation"] is None
    assert data["recommendation_error"] == RecommendationMessagesFR.ANALYSIS_FAILED
    assert data["costs"]["loa"]["additional_fees"]["penalties"] == 2800.0
    assert data["costs"]["lld"]["additional_fees"]["penalties"] == 3360.0
    assert len(data["warnings"]) == 1


def test_compare_logs_costs_once(client):
    """Test the cost summary of a comparison is logged by the use case only."""
    logger_func = Mock()
    use_case = CompareFinancingOptions(
        CalculateFinancingCosts(), StubRecommendationService(), logger=logger_func
    )

    with (
        patch.object(routes, "_compare_use_case", use_case),
        patch.object(routes, "log_cost_calculation") as mock_log_cost_calculation,
    ):
        response = client.post("/financing/compare", json=FORM)

    assert response.status_code == status.HTTP_200_OK
    mock_log_cost_calculation.assert_not_called()
    components = [call.args[1] for call in logger_func.call_args_list]
    assert components.count("costs") == 1
