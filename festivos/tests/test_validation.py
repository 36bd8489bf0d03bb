"""Tests for year and date guards."""

from datetime import date, datetime

import numpy as np
import pytest

from festivos.src.validation import InvalidArgument, validate_date, validate_year


class TestValidateYear:
    def test_int(self):
        assert validate_year(2010) == 2010

    def test_first_valid_year(self):
        assert validate_year(1984) == 1984

    def test_numeric_string(self):
        assert validate_year(" 2010 ") == 2010

    def test_numpy_integer(self):
        assert validate_year(np.int64(2010)) == 2010
        assert isinstance(validate_year(np.int32(2010)), int)

    def test_numpy_bool_rejected(self):
        with pytest.raises(InvalidArgument):
            validate_year(np.bool_(True))

    def test_integral_float(self):
        assert validate_year(2010.0) == 2010

    @pytest.mark.parametrize("value", [1983, 1900, 0, -5, "1983"])
    def test_too_early(self, value):
        with pytest.raises(InvalidArgument):
            validate_year(value)

    @pytest.mark.parametrize("value", ["abc", "", None, 2010.5, True, [2010], date(2010, 1, 1)])
    def test_not_an_integer(self, value):
        with pytest.raises(InvalidArgument):
            validate_year(value)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            validate_year("abc")


class TestValidateDate:
    def test_date(self):
        assert validate_date(date(2010, 1, 1)) is True

    def test_datetime(self):
        assert validate_date(datetime(2010, 1, 1, 12, 0)) is True

    @pytest.mark.parametrize("value", ["2010-01-01", 1262322000000, 2010, None])
    def test_not_a_date(self, value):
        assert validate_date(value) is False

    def test_old_year_raises(self):
        with pytest.raises(InvalidArgument):
            validate_date(date(1983, 12, 25))
