# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Shared test fixtures for the ESG preview test suite."""

from __future__ import annotations

import pytest

from esg_preview.data.models import SupplierMetrics

SUB_METRICS = (
    "energy_efficiency",
    "waste_management_score",
    "pollution_control",
    "wage_fairness",
    "human_rights_index",
    "diversity_inclusion_score",
    "community_engagement",
    "worker_safety",
    "transparency_score",
    "corruption_risk",
    "board_diversity",
    "ethics_program",
    "compliance_systems",
)


@pytest.fixture()
def form_defaults() -> dict:
    """The untouched add-supplier form: every index at 0.5, 30% renewables."""
    record = {key: 0.5 for key in SUB_METRICS}
    record["renewable_energy_percent"] = 30
    return record


@pytest.fixture()
def neutral_record() -> dict:
    """Every sub-metric at the midpoint, renewables included."""
    record = {key: 0.5 for key in SUB_METRICS}
    record["renewable_energy_percent"] = 50
    return record


@pytest.fixture()
def full_disclosure_record() -> dict:
    """A record that satisfies every key-metric check, zero intensities included."""
    return {
        "revenue": 100,
        "total_emissions": 50,
        "renewable_energy_percent": 20,
        "water_usage": 0,
        "waste_generated": 0,
        "injury_rate": 2,
        "training_hours": 10,
        "living_wage_ratio": 1,
        "gender_diversity_percent": 40,
        "board_diversity": 0.5,
        "board_independence": 60,
        "transparency_score": 0.7,
        "anti_corruption_policy": True,
    }


@pytest.fixture()
def strong_supplier() -> SupplierMetrics:
    """A well-performing supplier with a few weak spots."""
    return SupplierMetrics(
        name="Acme Textiles",
        country="Portugal",
        industry="Manufacturing",
        energy_efficiency=0.85,
        waste_management_score=0.8,
        pollution_control=0.75,
        renewable_energy_percent=70,
        wage_fairness=0.9,
        human_rights_index=0.95,
        diversity_inclusion_score=0.4,
        community_engagement=0.55,
        worker_safety=0.88,
        transparency_score=0.8,
        corruption_risk=0.1,
        board_diversity=0.3,
        ethics_program=0.7,
        compliance_systems=0.65,
        revenue=250,
        total_emissions=1200,
        water_usage=300,
        waste_generated=40,
        injury_rate=1.2,
        training_hours=24,
        living_wage_ratio=1.1,
        board_independence=55,
        anti_corruption_policy=True,
    )
