"""Unit tests for category and tag names."""

import pytest
from pydantic import ValidationError

from inkwell.domain.value import CategoryName, TagName


@pytest.mark.parametrize("name", ["Science Fiction", "Sci-Fi", "Épopée", "Top 10"])
def test_category_name_accepts_letters_digits_spaces_and_hyphens(name):
    assert CategoryName(name).root == name


@pytest.mark.parametrize("name", ["snake_case", "__", "sci_fi tales"])
def test_category_name_rejects_underscores(name):
    with pytest.raises(ValidationError):
        CategoryName(name)


def test_category_name_keeps_casing_and_keys_on_lowercase():
    name = CategoryName("  Epic Fantasy ")

    assert name.root == "Epic Fantasy"
    assert name.key == "epic fantasy"


def test_tag_name_is_lowercased():
    assert TagName(" Slow-Burn ").root == "slow-burn"


@pytest.mark.parametrize("name", ["slow_burn", "_magic"])
def test_tag_name_rejects_underscores(name):
    with pytest.raises(ValidationError):
        TagName(name)
