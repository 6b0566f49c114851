"""Calculate financing costs use case."""

from typing import Optional

from autofinance.application.dtos.assumptions import CostAssumptions
from autofinance.application.dtos.financing import (
    AdditionalFees,
    CostEvolutionPoint,
    CreditParams,
    DetailedCosts,
    FinancingCosts,
    FinancingInput,
    LLDParams,
    LOAParams,
)
from autofinance.domain.value_objects.apr import APR
from autofinance.domain.value_objects.comparison_horizon import ComparisonHorizon


def _annuity_payment(principal: float, monthly_rate: float, num_payments: int) -> float:
    """
    Monthly payment that repays the principal over num_payments.

    M = P * [r(1+r)^n] / [(1+r)^n - 1]
    """
    if monthly_rate == 0:
        return principal / num_payments
    factor = (1 + monthly_rate) ** num_payments
    return principal * (monthly_rate * factor) / (factor - 1)


def _annuity_present_value(payment: float, monthly_rate: float, num_payments: int) -> float:
    """
    Principal still owed when num_payments payments remain.

    PV = M * [1 - (1+r)^-n] / r
    """
    if num_payments <= 0:
        return 0.0
    if monthly_rate == 0:
        return payment * num_payments
    return payment * (1 - (1 + monthly_rate) ** -num_payments) / monthly_rate


class CalculateFinancingCosts:
    """
    Use case for computing the detailed cost of each financing option.

    All methods are pure: the same parameters always give the same result.
    Inputs are expected to be validated already (see FinancingInput).

    Accounting convention, shared by the three options:
    - total_payments: cash paid over the comparison horizon, down payment or
      first payment included
    - total_cost_usage: total_payments, minus the value of a vehicle the
      consumer keeps, plus loan principal still owed at the horizon end,
      floored at 0; additional fees are reported apart
    - total_cost_ownership: cash needed to end the horizon owning the vehicle
      (0 when ownership is impossible)

    Currency outputs are rounded to cents once, at the end.
    """

    def __init__(self, assumptions: Optional[CostAssumptions] = None) -> None:
        """
        Initialize the calculator.

        Args:
            assumptions: Market assumptions (defaults to CostAssumptions())
        """
        self._assumptions = assumptions or CostAssumptions()

    def calculate_credit(self, params: CreditParams) -> DetailedCosts:
        """
        Calculate loan (Crédit) costs.

        The theoretical payment comes from the amortization formula over the
        full loan term; the quoted monthly payment, when given, is what the
        consumer actually pays over the horizon.

        Args:
            params: Loan parameters

        Returns:
            Detailed loan costs
        """
        a = self._assumptions
        principal = params.vehicle_price - params.down_payment
        monthly_rate = APR.from_percentage(params.interest_rate).monthly_rate

        comparison_payments = ComparisonHorizon(params.duration).months
        credit_payments = ComparisonHorizon(params.credit_duration or params.duration).months

        theoretical_payment = _annuity_payment(principal, monthly_rate, credit_payments)
        if monthly_rate == 0:
            total_interest = 0.0
        else:
            total_interest = theoretical_payment * credit_payments - principal

        remaining_debt = _annuity_present_value(
            theoretical_payment, monthly_rate, credit_payments - comparison_payments
        )

        # Flat yearly depreciation of the vehicle the buyer keeps
        residual_value = params.vehicle_price * (1 - a.depreciation_rate) ** params.duration

        quoted_payment = (
            params.monthly_payment if params.monthly_payment is not None else theoretical_payment
        )
        total_payments = (
            quoted_payment * min(comparison_payments, credit_payments) + params.down_payment
        )
        total_cost_usage = max(0.0, total_payments - residual_value + remaining_debt)
        total_cost_ownership = total_payments + remaining_debt

        fees = AdditionalFees(
            establishment_fee=round(
                min(principal * a.credit_establishment_fee_rate, a.credit_establishment_fee_cap), 2
            ),
            insurance=round(
                max(params.vehicle_price * a.credit_insurance_rate, a.credit_insurance_minimum)
                * params.duration,
                2,
            ),
            maintenance=round(a.credit_annual_maintenance * params.duration, 2),
            penalties=0.0,
        )

        return DetailedCosts(
            monthly_payment=round(theoretical_payment, 2),
            total_payments=round(total_payments, 2),
            total_interest=round(total_interest, 2),
            residual_value=round(residual_value, 2),
            remaining_debt=round(remaining_debt, 2),
            total_cost_ownership=round(total_cost_ownership, 2),
            total_cost_usage=round(total_cost_usage, 2),
            additional_fees=fees,
        )

    def calculate_loa(self, params: LOAParams) -> DetailedCosts:
        """
        Calculate lease with purchase option (LOA) costs.

        Args:
            params: LOA parameters

        Returns:
            Detailed LOA costs
        """
        a = self._assumptions
        num_payments = ComparisonHorizon(params.duration).months

        # Purchase-option price at term end
        residual_value = params.vehicle_price * params.residual_value_rate / 100
        total_payments = params.monthly_payment * num_payments + params.first_payment

        fees = AdditionalFees(
            establishment_fee=a.loa_establishment_fee,
            insurance=round(
                max(params.vehicle_price * a.loa_insurance_rate, a.loa_insurance_minimum)
                * params.duration,
                2,
            ),
            maintenance=0.0,
            penalties=self._mileage_penalty(params.mileage, params.duration, a.loa_penalty_per_km),
        )

        return DetailedCosts(
            monthly_payment=round(params.monthly_payment, 2),
            total_payments=round(total_payments, 2),
            total_interest=0.0,  # interest is built into the rent
            residual_value=round(residual_value, 2),
            total_cost_ownership=round(total_payments + residual_value, 2),
            total_cost_usage=round(total_payments, 2),
            additional_fees=fees,
        )

    def calculate_lld(self, params: LLDParams) -> DetailedCosts:
        """
        Calculate long-term rental (LLD) costs.

        Insurance and maintenance are bundled in the rent.

        Args:
            params: LLD parameters

        Returns:
            Detailed LLD costs
        """
        a = self._assumptions
        num_payments = ComparisonHorizon(params.duration).months
        total_payments = params.monthly_payment * num_payments + params.first_payment

        fees = AdditionalFees(
            establishment_fee=a.lld_establishment_fee,
            insurance=0.0,
            maintenance=0.0,
            penalties=self._mileage_penalty(params.mileage, params.duration, a.lld_penalty_per_km),
        )

        return DetailedCosts(
            monthly_payment=round(params.monthly_payment, 2),
            total_payments=round(total_payments, 2),
            total_interest=0.0,
            residual_value=0.0,
            total_cost_ownership=0.0,  # no ownership path
            total_cost_usage=round(total_payments, 2),
            additional_fees=fees,
        )

    def calculate_all(self, financing_input: FinancingInput) -> FinancingCosts:
        """
        Calculate the three options on the same horizon and mileage.

        Args:
            financing_input: Validated form submission

        Returns:
            Detailed costs per option
        """
        return FinancingCosts(
            credit=self.calculate_credit(financing_input.credit_params()),
            loa=self.calculate_loa(financing_input.loa_params()),
            lld=self.calculate_lld(financing_input.lld_params()),
        )

    @staticmethod
    def monthly_evolution(costs: FinancingCosts, duration: int) -> list[CostEvolutionPoint]:
        """
        Cumulative monthly payments of each option, month by month.

        Args:
            costs: Detailed costs per option
            duration: Comparison horizon in years

        Returns:
            One point per month of the horizon
        """
        return [
            CostEvolutionPoint(
                month=month,
                credit=round(costs.credit.monthly_payment * month, 2),
                loa=round(costs.loa.monthly_payment * month, 2),
                lld=round(costs.lld.monthly_payment * month, 2),
            )
            for month in range(1, ComparisonHorizon(duration).months + 1)
        ]

    def _mileage_penalty(self, mileage: int, duration: int, per_km: float) -> float:
        excess_km = mileage - self._assumptions.mileage_allowance
        if excess_km <= 0:
            return 0.0
        return round(excess_km * per_km * duration, 2)
