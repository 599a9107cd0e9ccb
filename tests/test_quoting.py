import pytest

from cfgutil.config import GenerateOptions, Quoting
from cfgutil.generator.quoting import clean, disallow_all

DOUBLE = GenerateOptions()
SINGLE = GenerateOptions(quoting=Quoting.SINGLE)
CAUTIOUS = GenerateOptions(cautious=True)


class TestClean:
    def test_plain_name_unwrapped(self):
        assert clean("accountId", DOUBLE) == "accountId"

    def test_whitespace_wraps(self):
        assert clean("My API", DOUBLE) == '"My API"'

    @pytest.mark.parametrize("raw", ["a\tb", "a\nb", "a b", "a\u2003b"])
    def test_unicode_whitespace_wraps(self, raw):
        assert clean(raw, DOUBLE) == f'"{raw}"'

    def test_quote_doubled_without_wrapping(self):
        assert clean('say"hi', DOUBLE) == 'say""hi'

    def test_quote_doubled_and_wrapped(self):
        assert clean('my "big" API', DOUBLE) == '"my ""big"" API"'

    def test_other_quote_left_alone(self):
        assert clean("it's", DOUBLE) == "it's"

    def test_single_quoting(self):
        assert clean("it's mine", SINGLE) == "'it''s mine'"
        assert clean('say"hi', SINGLE) == 'say"hi'

    def test_cautious_always_wraps(self):
        assert clean("accountId", CAUTIOUS) == '"accountId"'

    def test_force_wraps(self):
        assert clean(".*", DOUBLE, force=True) == '".*"'

    def test_empty(self):
        assert clean("", DOUBLE) == ""
        assert clean("", CAUTIOUS) == '""'


class TestDisallowAll:
    def test_same_in_every_mode(self):
        expected = '\tdisallow path=".*" title=".*"\n'
        assert disallow_all(DOUBLE) == expected
        assert disallow_all(CAUTIOUS) == expected

    def test_single(self):
        assert disallow_all(SINGLE) == "\tdisallow path='.*' title='.*'\n"
