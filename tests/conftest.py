"""Shared test helpers and fixtures."""

import pytest
from faker import Faker

from zkvote.registry import ElectionRegistry

# Principal addresses from the original contract tests
OWNER = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"
OTHER = "ST2CY5V39NHDPWSXMW9QDT3HC3GD6Q6XX4CFRK9AG"

HASH_1 = "1234567890abcdef1234567890abcdef1234567890abcdef1234567890abcdef"
HASH_2 = "0987654321fedcba0987654321fedcba0987654321fedcba0987654321fedcba"


def make_registry(administrator: str, voters=()) -> ElectionRegistry:
    """Build a registry with the given voters already registered."""
    registry = ElectionRegistry(administrator)
    for voter in voters:
        assert registry.register(voter).success
    return registry


@pytest.fixture
def registry():
    """Fresh election administered by OWNER, nobody registered."""
    return ElectionRegistry(OWNER)


@pytest.fixture
def fake():
    fake = Faker()
    Faker.seed(1234)
    return fake


@pytest.fixture
def voter_ids(fake):
    """Twenty distinct fake principal addresses."""
    return [fake.unique.bothify("ST" + "?" * 39, letters="0123456789ABCDEFGHJKMNPQRSTVWXYZ")
            for _ in range(20)]


@pytest.fixture
def commitments(fake):
    """Twenty distinct 64-character hex commitments."""
    return [fake.unique.hexify("^" * 64) for _ in range(20)]
