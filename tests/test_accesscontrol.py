import pytest

from wiegandac.accesscontrol import AccessControl


def test_numeric_keys_match_code():
    ac = AccessControl()
    for key in (1, 2, 3, 4):
        ac.add_input(key)
    assert ac.data() == "1234"
    assert ac.check() is True


def test_character_keys_match_code():
    ac = AccessControl()
    for key in "1234":
        ac.add_input(key)
    assert ac.check() is True


def test_wrong_code_is_rejected():
    ac = AccessControl()
    for key in "4321":
        ac.add_input(key)
    assert ac.check() is False
    assert ac.data() == "4321"


@pytest.mark.parametrize("typed", ["123", "12345", "01234", ""])
def test_near_misses_are_rejected(typed):
    ac = AccessControl()
    for key in typed:
        ac.add_input(key)
    assert ac.check() is False
    assert ac.data() == typed


def test_reset_clears_input():
    ac = AccessControl()
    for key in "99":
        ac.add_input(key)
    ac.reset_input()
    assert ac.data() == ""
    for key in "1234":
        ac.add_input(key)
    assert ac.check() is True


def test_input_keeps_only_latest_keys():
    ac = AccessControl()
    typed = "abcdefghij" * 4 + "1234"
    for key in typed:
        ac.add_input(key)
    assert len(ac.data()) == 36
    assert ac.data() == typed[-36:]
    assert ac.check() is False


def test_code_after_overflow_only_counts_whole_buffer():
    ac = AccessControl()
    for key in "x" * 50:
        ac.add_input(key)
    ac.reset_input()
    for key in "1234":
        ac.add_input(key)
    assert ac.check() is True


def test_numeric_key_offsets_from_zero_character():
    ac = AccessControl()
    ac.add_input(17)
    assert ac.data() == "A"


def test_on_success_is_kept():
    calls = []
    ac = AccessControl(lambda: calls.append(1))
    ac.on_success()
    assert calls == [1]