from __future__ import annotations

import pytest
from ideadrop.services._shared.ids import UserId, parse_entity_id
from ideadrop.services._shared.policies.common import is_owner


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("1", 1),
        (" 42 ", 42),
        (7, 7),
        ("0", None),
        ("-1", None),
        ("1e3", None),
        ("abc", None),
        ("٣", None),  # non-ASCII digit
        (None, None),
        (True, None),
        (3.0, None),
        ("2147483647", 2147483647),
        ("2147483648", None),
        ("99999999999999999999999", None),
        (2**63, None),
    ],
)
def test_parse_entity_id(raw, expected):
    assert parse_entity_id(raw) == expected


def test_is_owner_compares_values_not_strings():
    assert is_owner(actor_id=UserId(5), owner_id=5) is True
    assert is_owner(actor_id=UserId(5), owner_id=6) is False
    assert is_owner(actor_id="5", owner_id=5) is False
    assert is_owner(actor_id=None, owner_id=5) is False
