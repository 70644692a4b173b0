import pytest

from coursebook.birthday import BirthdayService


def test_wish_for_default_client_values():
    service = BirthdayService()
    assert (
        service.wish_happy_birthday("Bob", 42)
        == "Happy Birthday Bob, congratulations with the 42 years!"
    )


def test_wish_mentions_name_and_years():
    message = BirthdayService().wish_happy_birthday("Alice", 7)
    assert "Alice" in message
    assert " 7 years" in message
    assert message.startswith("Happy Birthday ")


def test_wish_rejects_non_integer_years():
    with pytest.raises(TypeError):
        BirthdayService().wish_happy_birthday("Bob", "42")


def test_wish_rejects_out_of_range_years():
    with pytest.raises(ValueError):
        BirthdayService().wish_happy_birthday("Bob", 2**31)