"""French prompt and user-facing messages for the financing analyzer."""

from autofinance.application.dtos.financing import FinancingInput


class RecommendationMessagesFR:
    """Centralized French prompt template and user-facing messages."""

    SYSTEM_PROMPT = (
        "Vous êtes un conseiller expert en financement automobile. "
        "Vous comparez la LOA, la LLD et le crédit classique pour un particulier. "
        "Répondez uniquement avec un objet JSON de la forme "
        '{"recommendation": "LOA" | "LLD" | "Crédit", "reasoning": "..."}. '
        "Le raisonnement doit être rédigé en français."
    )

    USER_PROMPT_TEMPLATE = """En fonction des informations suivantes, recommandez la meilleure option de financement de véhicule (LOA, LLD ou Crédit).

Prix du véhicule : {vehicle_price}
Durée : {duration} ans
Kilométrage annuel : {mileage}
Mensualité LOA : {monthly_payment_loa}
Mensualité LLD : {monthly_payment_lld}
Mensualité Crédit : {monthly_payment_credit}
Premier loyer LOA : {first_payment_loa}
Premier loyer LLD : {first_payment_lld}
Durée du crédit : {credit_duration} ans
Apport : {down_payment}
Taux d'intérêt crédit : {interest_rate} %
Valeur résiduelle LOA : {residual_value_rate} %
Préférence Flexibilité : {preference_flexibility}
Préférence Zéro Contrainte : {preference_zero_constraint}
Préférence Optimisation des coûts : {preference_cost_optimization}

Considérez les points suivants :

- LOA : Idéal pour la flexibilité et l'option d'achat à la fin. Les mensualités sont souvent inférieures à celles d'un crédit.
- LLD : Idéal pour ceux qui ne veulent aucune contrainte, changent souvent de voiture et apprécient la facilité d'entretien. Vous ne serez jamais propriétaire du véhicule et le loyer est payé "à perte".
- Crédit : Vous êtes propriétaire du véhicule et le coût total est souvent inférieur si vous gardez la voiture plusieurs années. Vous êtes responsable de l'entretien et de la revente. Un taux d'intérêt élevé peut rendre le crédit moins attractif.

Répondez avec une recommandation et un raisonnement. La réponse doit être en français."""

    # Generic failure shown instead of the recommendation (no fallback answer)
    ANALYSIS_FAILED = (
        "Une erreur est survenue lors de l'analyse de votre profil. Veuillez réessayer."
    )

    # Kilometres per year above which LOA/LLD penalties become significant
    HIGH_MILEAGE_THRESHOLD = 20000

    @classmethod
    def render_user_prompt(cls, financing_input: FinancingInput) -> str:
        """Substitute every form field into the prompt template."""
        fields = financing_input.model_dump()
        # Loan term defaults to the comparison duration
        fields["credit_duration"] = financing_input.credit_duration or financing_input.duration
        return cls.USER_PROMPT_TEMPLATE.format(**fields)

    @staticmethod
    def high_mileage_warning(mileage: int) -> str:
        """Warning for consumers driving well above the contract allowance."""
        formatted = f"{mileage:,}".replace(",", " ")
        return (
            f"Attention - Kilométrage élevé : avec {formatted} km/an, les pénalités en LOA/LLD "
            "peuvent être importantes. Le crédit classique est généralement plus avantageux "
            "pour les gros rouleurs."
        )

    @staticmethod
    def remaining_debt_warning(remaining_debt: float) -> str:
        """Warning when the loan outlasts the comparison horizon."""
        return (
            f"Le crédit n'est pas soldé à la fin de la période comparée : "
            f"{remaining_debt:.2f} € restent dus."
        )
