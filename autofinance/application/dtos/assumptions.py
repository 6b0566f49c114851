"""Cost assumption DTOs."""

from pydantic import ConfigDict

from autofinance.application.dtos.base import DTO


class CostAssumptions(DTO):
    """
    Market assumptions used by the cost calculator.

    Defaults reflect typical French market figures; every value can be
    overridden through settings (e.g. COST_ASSUMPTIONS__DEPRECIATION_RATE=0.18).
    """

    # Loan (Crédit)
    depreciation_rate: float = 0.15  # per year
    credit_establishment_fee_rate: float = 0.012  # of the financed principal
    credit_establishment_fee_cap: float = 600.0
    credit_insurance_rate: float = 0.025  # of the vehicle price, per year
    credit_insurance_minimum: float = 600.0  # per year
    credit_annual_maintenance: float = 900.0

    # Lease with purchase option (LOA)
    loa_establishment_fee: float = 350.0
    loa_insurance_rate: float = 0.02  # of the vehicle price, per year
    loa_insurance_minimum: float = 500.0  # per year
    loa_penalty_per_km: float = 0.10

    # Long-term rental (LLD)
    lld_establishment_fee: float = 200.0
    lld_penalty_per_km: float = 0.12

    # Yearly mileage included in LOA/LLD contracts
    mileage_allowance: int = 15000

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "depreciation_rate": 0.15,
                "mileage_allowance": 15000,
                "loa_penalty_per_km": 0.10,
                "lld_penalty_per_km": 0.12,
            }
        }
    )
