"""Financing DTOs."""

from typing import Literal, Optional

from pydantic import ConfigDict, Field, model_validator

from autofinance.application.dtos.base import DTO
from autofinance.domain.entities.financing_option import FinancingOption
from autofinance.domain.errors import InputValidationError

YesNo = Literal["yes", "no"]


class CreditParams(DTO):
    """Loan (Crédit) calculation parameters."""

    vehicle_price: float
    down_payment: float
    duration: int  # comparison horizon, years
    interest_rate: float  # annual, percent
    monthly_payment: Optional[float] = None  # payment quoted to the consumer
    credit_duration: Optional[int] = None  # loan term in years, defaults to duration


class LOAParams(DTO):
    """Lease with purchase option (LOA) calculation parameters."""

    vehicle_price: float
    first_payment: float = 0.0  # does not reduce the financed capital
    duration: int
    residual_value_rate: float  # percent of the vehicle price
    monthly_payment: float
    mileage: int


class LLDParams(DTO):
    """Long-term rental (LLD) calculation parameters."""

    vehicle_price: float
    first_payment: float = 0.0
    duration: int
    monthly_payment: float
    mileage: int


class FinancingInput(DTO):
    """Validated financing form submission."""

    vehicle_price: float = Field(gt=0)
    down_payment: float = Field(ge=0)
    duration: int = Field(ge=1, le=10)
    mileage: int = Field(ge=1000)
    interest_rate: float = Field(ge=0, le=20)
    residual_value_rate: float = Field(ge=20, le=80)
    monthly_payment_credit: float = Field(gt=0)
    monthly_payment_loa: float = Field(gt=0)
    monthly_payment_lld: float = Field(gt=0)
    first_payment_loa: float = Field(default=0.0, ge=0)
    first_payment_lld: float = Field(default=0.0, ge=0)
    credit_duration: Optional[int] = Field(default=None, ge=1, le=10)
    preference_flexibility: YesNo = "no"
    preference_zero_constraint: YesNo = "no"
    preference_cost_optimization: YesNo = "yes"

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
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
        }
    )

    @model_validator(mode="after")
    def check_down_payment(self) -> "FinancingInput":
        if self.down_payment > self.vehicle_price:
            raise InputValidationError("Down payment cannot exceed vehicle price")
        return self

    def credit_params(self) -> CreditParams:
        return CreditParams(
            vehicle_price=self.vehicle_price,
            down_payment=self.down_payment,
            duration=self.duration,
            interest_rate=self.interest_rate,
            monthly_payment=self.monthly_payment_credit,
            credit_duration=self.credit_duration,
        )

    def loa_params(self) -> LOAParams:
        return LOAParams(
            vehicle_price=self.vehicle_price,
            first_payment=self.first_payment_loa,
            duration=self.duration,
            residual_value_rate=self.residual_value_rate,
            monthly_payment=self.monthly_payment_loa,
            mileage=self.mileage,
        )

    def lld_params(self) -> LLDParams:
        return LLDParams(
            vehicle_price=self.vehicle_price,
            first_payment=self.first_payment_lld,
            duration=self.duration,
            monthly_payment=self.monthly_payment_lld,
            mileage=self.mileage,
        )


class AdditionalFees(DTO):
    """Costs reported beside the payments."""

    establishment_fee: float
    insurance: float
    maintenance: float
    penalties: float


class DetailedCosts(DTO):
    """Cost breakdown of one financing option over the comparison horizon."""

    monthly_payment: float
    total_payments: float
    total_interest: float
    residual_value: Optional[float] = None
    remaining_debt: Optional[float] = None
    total_cost_ownership: float
    total_cost_usage: float
    additional_fees: AdditionalFees

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "monthly_payment": 280.0,
                "total_payments": 13440.0,
                "total_interest": 0.0,
                "residual_value": 9240.0,
                "remaining_debt": None,
                "total_cost_ownership": 22680.0,
                "total_cost_usage": 13440.0,
                "additional_fees": {
                    "establishment_fee": 350.0,
                    "insurance": 2000.0,
                    "maintenance": 0.0,
                    "penalties": 0.0,
                },
            }
        }
    )


class FinancingCosts(DTO):
    """Detailed costs of the three options, computed on the same horizon."""

    credit: DetailedCosts
    loa: DetailedCosts
    lld: DetailedCosts

    def for_option(self, option: FinancingOption) -> DetailedCosts:
        return {
            FinancingOption.CREDIT: self.credit,
            FinancingOption.LOA: self.loa,
            FinancingOption.LLD: self.lld,
        }[option]

    def ranking(self) -> list[FinancingOption]:
        """Options from the lowest to the highest usage cost (stable on ties)."""
        return sorted(FinancingOption, key=lambda option: self.for_option(option).total_cost_usage)


class CostEvolutionPoint(DTO):
    """Cumulative monthly payments of each option after a given month."""

    month: int
    credit: float
    loa: float
    lld: float


class ProfileDefaults(DTO):
    """Suggested default rates for the financing form."""

    interest_rate: float  # percent
    residual_value_rate: float  # percent

    model_config = ConfigDict(
        json_schema_extra={"example": {"interest_rate": 5.8, "residual_value_rate": 42.0}}
    )


class RecommendationResult(DTO):
    """Recommendation returned by the text-generation service."""

    recommendation: FinancingOption
    reasoning: str = Field(min_length=1)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "recommendation": "Crédit",
                "reasoning": "Vous gardez le véhicule longtemps et le taux reste raisonnable.",
            }
        }
    )


class ComparisonReport(DTO):
    """Everything the presentation layer needs for one submission."""

    costs: FinancingCosts
    ranking: list[FinancingOption]
    cheapest_option: FinancingOption
    monthly_evolution: list[CostEvolutionPoint]
    warnings: list[str] = Field(default_factory=list)
    recommendation: Optional[RecommendationResult] = None
    recommendation_error: Optional[str] = None
