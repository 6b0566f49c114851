"""Unit tests for CompareFinancingOptions use case."""

from unittest.mock import Mock

from autofinance.application.dtos.financing import FinancingInput, RecommendationResult
from autofinance.application.ports.recommendation_service import RecommendationService
from autofinance.application.use_cases.calculate_financing_costs import CalculateFinancingCosts
from autofinance.application.use_cases.compare_financing_options import CompareFinancingOptions
from autofinance.application.use_cases.recommendation_messages_fr import (
    RecommendationMessagesFR,
)
from autofinance.domain.entities.financing_option import FinancingOption
from autofinance.domain.errors import RecommendationServiceError


class FixedRecommendationService(RecommendationService):
    """Recommendation service returning a fixed answer."""

    def __init__(self, option: FinancingOption) -> None:
        self.calls = 0
        self._option = option

    def recommend(self, financing_input: FinancingInput) -> RecommendationResult:
        self.calls += 1
        return RecommendationResult(recommendation=self._option, reasoning="Réponse de test.")


class FailingRecommendationService(RecommendationService):
    """Recommendation service whose call always fails."""

    def recommend(self, financing_input: FinancingInput) -> RecommendationResult:
        raise RecommendationServiceError("Recommendation reply is not valid JSON")


def _financing_input(**overrides) -> FinancingInput:
    values = {
        "vehicle_price": 22000,
        "down_payment": 2000,
        "duration": 4,
        "mileage": 12000,
        "interest_rate": 5.8,
        "residual_value_rate": 42,
        "monthly_payment_credit": 420,
        "monthly_payment_loa": 280,
        "monthly_payment_lld": 264,
    }
    values.update(overrides)
    return FinancingInput(**values)


class TestCompareFinancingOptions:
    """Test cases for CompareFinancingOptions."""

    def setup_method(self) -> None:
        """Set up test fixtures."""
        self.calculator = CalculateFinancingCosts()

    def test_report_with_recommendation(self) -> None:
        """Test costs and recommendation are merged in one report."""
        service = FixedRecommendationService(FinancingOption.LOA)
        use_case = CompareFinancingOptions(self.calculator, service)

        report = use_case.execute(_financing_input(), request_id="req-1")

        assert service.calls == 1
        assert report.recommendation.recommendation == FinancingOption.LOA
        assert report.recommendation_error is None
        assert report.costs == self.calculator.calculate_all(_financing_input())
        assert report.ranking == [FinancingOption.CREDIT, FinancingOption.LLD, FinancingOption.LOA]
        assert report.cheapest_option == FinancingOption.CREDIT
        assert len(report.monthly_evolution) == 48
        assert report.warnings == []

    def test_failed_recommendation_does_not_block_costs(self) -> None:
        """Test a failing service still yields the full cost comparison."""
        use_case = CompareFinancingOptions(self.calculator, FailingRecommendationService())

        report = use_case.execute(_financing_input())

        assert report.recommendation is None
        assert report.recommendation_error == RecommendationMessagesFR.ANALYSIS_FAILED
        assert report.costs.loa.total_cost_usage == 13440.0
        assert report.cheapest_option == FinancingOption.CREDIT

    def test_disabled_recommendation_service(self) -> None:
        """Test the report without a configured service."""
        use_case = CompareFinancingOptions(self.calculator)

        report = use_case.execute(_financing_input())

        assert report.recommendation is None
        assert report.recommendation_error == RecommendationMessagesFR.ANALYSIS_FAILED
        assert report.costs.lld.total_cost_usage == 12672.0

    def test_high_mileage_warning(self) -> None:
        """Test a warning is added above 20000 km/year."""
        use_case = CompareFinancingOptions(self.calculator)

        report = use_case.execute(_financing_input(mileage=25000))

        assert len(report.warnings) == 1
        assert "25 000 km/an" in report.warnings[0]
        assert report.costs.loa.additional_fees.penalties == 4000.0
        assert report.costs.lld.additional_fees.penalties == 4800.0

    def test_remaining_debt_warning(self) -> None:
        """Test a warning is added when the loan outlasts the horizon."""
        use_case = CompareFinancingOptions(self.calculator)

        report = use_case.execute(_financing_input(duration=3, credit_duration=5))

        assert report.costs.credit.remaining_debt > 0
        assert any("restent dus" in warning for warning in report.warnings)

    def test_logs_costs_and_recommendation_outcome(self) -> None:
        """Test the injected logger receives each step."""
        logger = Mock()
        use_case = CompareFinancingOptions(
            self.calculator, FailingRecommendationService(), logger=logger
        )

        use_case.execute(_financing_input(), request_id="req-42")

        components = [call.args[1] for call in logger.call_args_list]
        assert components == ["costs", "recommendation"]
        assert all(call.args[0] == "req-42" for call in logger.call_args_list)
        assert logger.call_args_list[0].kwargs["cheapest_option"] == "Crédit"
        assert logger.call_args_list[1].kwargs["outcome"] == "failed"
