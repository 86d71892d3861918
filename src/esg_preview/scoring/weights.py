"""Scoring weight constants for the ESG preview.

All weights within a pillar must sum to 1.0.  The three pillar weights
define the contribution of each pillar to the overall preview score.
"""

# ---------------------------------------------------------------------------
# Pillar weights in overall score
# ---------------------------------------------------------------------------
ENVIRONMENTAL_WEIGHT = 0.33
SOCIAL_WEIGHT = 0.33
GOVERNANCE_WEIGHT = 0.34

# ---------------------------------------------------------------------------
# Environmental sub-metric weights (must sum to 1.0)
# ---------------------------------------------------------------------------
ENV_ENERGY_EFFICIENCY_WEIGHT = 0.25
ENV_WASTE_MANAGEMENT_WEIGHT = 0.25
ENV_POLLUTION_CONTROL_WEIGHT = 0.20
ENV_RENEWABLE_ENERGY_WEIGHT = 0.30

# ---------------------------------------------------------------------------
# Social sub-metric weights (must sum to 1.0)
# ---------------------------------------------------------------------------
SOC_WAGE_FAIRNESS_WEIGHT = 0.25
SOC_HUMAN_RIGHTS_WEIGHT = 0.30
SOC_DIVERSITY_INCLUSION_WEIGHT = 0.15
SOC_COMMUNITY_ENGAGEMENT_WEIGHT = 0.15
SOC_WORKER_SAFETY_WEIGHT = 0.15

# ---------------------------------------------------------------------------
# Governance sub-metric weights (must sum to 1.0)
# ---------------------------------------------------------------------------
GOV_TRANSPARENCY_WEIGHT = 0.25
GOV_CORRUPTION_RISK_WEIGHT = 0.25  # applied to (1 - corruption_risk)
GOV_BOARD_DIVERSITY_WEIGHT = 0.15
GOV_ETHICS_PROGRAM_WEIGHT = 0.20
GOV_COMPLIANCE_SYSTEMS_WEIGHT = 0.15

# ---------------------------------------------------------------------------
# Metric tables: (field, label, sub-weight) per pillar, in display order
# ---------------------------------------------------------------------------
ENVIRONMENTAL_METRICS: tuple[tuple[str, str, float], ...] = (
    ("energy_efficiency", "Energy Efficiency", ENV_ENERGY_EFFICIENCY_WEIGHT),
    ("waste_management_score", "Waste Management", ENV_WASTE_MANAGEMENT_WEIGHT),
    ("pollution_control", "Pollution Control", ENV_POLLUTION_CONTROL_WEIGHT),
    ("renewable_energy_percent", "Renewable Energy", ENV_RENEWABLE_ENERGY_WEIGHT),
)

SOCIAL_METRICS: tuple[tuple[str, str, float], ...] = (
    ("wage_fairness", "Wage Fairness", SOC_WAGE_FAIRNESS_WEIGHT),
    ("human_rights_index", "Human Rights Index", SOC_HUMAN_RIGHTS_WEIGHT),
    ("diversity_inclusion_score", "Diversity & Inclusion", SOC_DIVERSITY_INCLUSION_WEIGHT),
    ("community_engagement", "Community Engagement", SOC_COMMUNITY_ENGAGEMENT_WEIGHT),
    ("worker_safety", "Worker Safety", SOC_WORKER_SAFETY_WEIGHT),
)

GOVERNANCE_METRICS: tuple[tuple[str, str, float], ...] = (
    ("transparency_score", "Transparency", GOV_TRANSPARENCY_WEIGHT),
    ("corruption_risk", "Corruption Risk", GOV_CORRUPTION_RISK_WEIGHT),
    ("board_diversity", "Board Diversity", GOV_BOARD_DIVERSITY_WEIGHT),
    ("ethics_program", "Ethics Program", GOV_ETHICS_PROGRAM_WEIGHT),
    ("compliance_systems", "Compliance Systems", GOV_COMPLIANCE_SYSTEMS_WEIGHT),
)

# Lower-is-better metrics, inverted (1 - x) before weighting
RISK_METRICS = frozenset({"corruption_risk"})

# Metrics reported on a 0-100 scale, divided by 100 before weighting
PERCENT_METRICS = frozenset({"renewable_energy_percent"})
