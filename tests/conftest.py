"""Shared pytest fixtures for hand classification tests."""

from random import Random

import pytest

from tests.helpers.card_utils import full_deck, make_cards_from_strings


@pytest.fixture
def rng():
    """Provide a reproducible random generator."""
    return Random(42)


@pytest.fixture
def deck():
    return full_deck()


@pytest.fixture
def royal_flush():
    return make_cards_from_strings(["Th", "Jh", "Qh", "Kh", "Ah"])


@pytest.fixture
def full_house():
    return make_cards_from_strings(["As", "Ah", "Ad", "Kc", "Ks"])


@pytest.fixture
def config_file(tmp_path):
    """Path for a YAML config inside a temporary directory."""
    return tmp_path / "configs" / "poker.yaml"
