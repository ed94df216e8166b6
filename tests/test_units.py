"""Tests for byte-rate unit conversion."""

import pytest

from disk_stats.errors import InvalidUnitError
from disk_stats.units import UNITS, convert


def test_bytes_is_identity():
    assert convert(123456, 'bytes') == 123456


@pytest.mark.parametrize('unit, expected', [
    ('KiB', 1024.0),
    ('MiB', 1.0),
    ('GiB', 1.0 / 1024),
])
def test_each_unit_divides_original_value(unit, expected):
    assert convert(1048576, unit) == expected


def test_gib():
    assert convert(3 * 1024 ** 3, 'GiB') == 3.0


def test_unknown_unit_raises():
    with pytest.raises(InvalidUnitError) as excinfo:
        convert(1048576, 'TiB')

    assert excinfo.value.unit == 'TiB'
    assert "'TiB'" in str(excinfo.value)
    assert excinfo.value.valid == list(UNITS)


def test_units_are_case_sensitive():
    with pytest.raises(InvalidUnitError):
        convert(1024, 'kib')
