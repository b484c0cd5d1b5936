from datetime import date

import pytest

from boutique.shared.utils.dates import string_to_date


@pytest.mark.parametrize("value", ["2023-01-31", "31-01-2023", " 31-01-2023 "])
def test_string_to_date_accepts_iso_and_legacy(value):
    assert string_to_date(value) == date(2023, 1, 31)


def test_string_to_date_rejects_unknown_format():
    with pytest.raises(ValueError):
        string_to_date("01/31/2023")
