"""
Unit tests for document types.
"""

import pytest
from pydantic import ValidationError

from models.documents import User


def test_user_accepts_camel_and_snake_case():
    camel = User.model_validate({"id": "1", "firstName": "Ada", "lastName": "Lovelace"})
    snake = User(id="1", first_name="Ada", last_name="Lovelace")

    assert camel == snake


def test_user_dumps_camel_case():
    user = User(id="1", first_name="Ada", last_name="Lovelace", age=36)

    assert user.model_dump(by_alias=True, exclude_none=True) == {
        "id": "1",
        "firstName": "Ada",
        "lastName": "Lovelace",
        "age": 36,
    }


def test_full_name_concatenates():
    assert User(first_name="Ada", last_name="Lovelace").full_name == "AdaLovelace"


def test_user_requires_names():
    with pytest.raises(ValidationError):
        User.model_validate({"id": "1", "firstName": "Ada"})


def test_user_rejects_negative_age():
    with pytest.raises(ValidationError):
        User(first_name="Ada", last_name="Lovelace", age=-1)
