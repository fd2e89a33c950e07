import pytest

from recipe_ingredient_parser.i18n import get_profile


@pytest.fixture
def eng():
    return get_profile("eng")


@pytest.fixture
def deu():
    return get_profile("deu")
