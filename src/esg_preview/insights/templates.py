# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Insight template definitions.

Each risk template carries the static wording of a supplier risk and
its suggested mitigation.  Standards, certifications, and compliance
gaps are plain labels.
"""

from __future__ import annotations

from dataclasses import dataclass

from esg_preview.data.models import RiskFactor


@dataclass(frozen=True)
class RiskFactorTemplate:
    """Immutable template for a single supplier risk."""

    factor: str
    severity: str     # "Low", "Medium", "High"
    probability: str  # "Low", "Medium", "High"
    mitigation: str

    def build(self) -> RiskFactor:
        return RiskFactor(
            factor=self.factor,
            severity=self.severity,
            probability=self.probability,
            mitigation=self.mitigation,
        )


# ---------------------------------------------------------------------------
# Risk factors
# ---------------------------------------------------------------------------

CARBON_EMISSIONS_RISK = RiskFactorTemplate(
    factor="Carbon Emissions Compliance",
    severity="High",
    probability="Medium",
    mitigation="Implement emissions reduction program with strict targets",
)

HUMAN_RIGHTS_RISK = RiskFactorTemplate(
    factor="Human Rights Violations",
    severity="High",
    probability="Medium",
    mitigation="Develop comprehensive human rights due diligence process",
)

CORRUPTION_RISK = RiskFactorTemplate(
    factor="Corruption and Bribery",
    severity="High",
    probability="Medium",
    mitigation="Strengthen anti-corruption policies and whistleblower protection",
)

SUPPLY_CHAIN_OPACITY_RISK = RiskFactorTemplate(
    factor="Supply Chain Opacity",
    severity="Medium",
    probability="High",
    mitigation="Implement end-to-end supply chain traceability and tracking",
)

REGULATORY_COMPLIANCE_RISK = RiskFactorTemplate(
    factor="Regulatory Compliance",
    severity="Medium",
    probability="Medium",
    mitigation="Establish regulatory intelligence system to track changes",
)

# ---------------------------------------------------------------------------
# Standards and certifications
# ---------------------------------------------------------------------------

STANDARD_ENVIRONMENTAL = "ISO 14001 Environmental Management"
STANDARD_SOCIAL = "SA8000 Social Accountability"
STANDARD_GOVERNANCE = "ISO 37001 Anti-Bribery Management"
STANDARD_GLOBAL_COMPACT = "UN Global Compact Principles"

CERT_GREEN_ENERGY = "Green Energy Certification"
CERT_FAIR_LABOR = "Fair Labor Association Certification"
CERT_QUALITY = "ISO 9001 Quality Management"

# ---------------------------------------------------------------------------
# Compliance gaps
# ---------------------------------------------------------------------------

GAP_EMISSIONS = "Carbon emissions reduction targets not met"
GAP_WATER = "Water conservation requirements not fulfilled"
GAP_WORKER_SAFETY = "Worker safety protocols below industry standards"
GAP_DISCLOSURE = "Insufficient disclosure of supply chain information"
