"""Estimate financing profile use case."""

from autofinance.application.dtos.financing import ProfileDefaults


class EstimateFinancingProfile:
    """Use case for suggesting default rates to pre-fill the financing form."""

    # (minimum down payment ratio, annual rate %), best profile first
    INTEREST_RATE_TIERS = [
        (0.30, 4.8),
        (0.15, 5.8),
    ]
    DEFAULT_INTEREST_RATE = 7.2

    # (maximum duration in years, residual value % of price)
    RESIDUAL_VALUE_TIERS = [
        (2, 60.0),
        (3, 50.0),
        (4, 42.0),
        (5, 32.0),
    ]
    DEFAULT_RESIDUAL_VALUE = 25.0

    def estimate_interest_rate(self, down_payment_ratio: float) -> float:
        """
        Estimate the loan rate from the share of the price paid upfront.

        Args:
            down_payment_ratio: Down payment divided by vehicle price

        Returns:
            Annual interest rate in percent
        """
        for min_ratio, rate in self.INTEREST_RATE_TIERS:
            if down_payment_ratio >= min_ratio:
                return rate
        return self.DEFAULT_INTEREST_RATE

    def estimate_residual_value(self, duration: int) -> float:
        """
        Estimate the LOA residual value for a contract length.

        Args:
            duration: Contract length in years

        Returns:
            Residual value in percent of the vehicle price
        """
        for max_years, residual in self.RESIDUAL_VALUE_TIERS:
            if duration <= max_years:
                return residual
        return self.DEFAULT_RESIDUAL_VALUE

    def suggest_defaults(
        self, vehicle_price: float, down_payment: float, duration: int
    ) -> ProfileDefaults:
        """
        Suggest both default rates for a vehicle and contract length.

        Args:
            vehicle_price: Vehicle price (must be positive)
            down_payment: Down payment amount
            duration: Contract length in years

        Returns:
            Suggested interest rate and residual value rate
        """
        return ProfileDefaults(
            interest_rate=self.estimate_interest_rate(down_payment / vehicle_price),
            residual_value_rate=self.estimate_residual_value(duration),
        )
