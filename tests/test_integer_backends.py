import pytest

from decimal import Decimal

from fractions import Fraction

import numpy as np

import gmpy2

from mp_rational import integer_backends

from mp_rational.integer_backends import (
    FormatFlags,
    IntegerBackend,
    NativeIntegerBackend,
    NATIVE_BACKEND,
    GMP_BACKEND,
    register_backend,
    get_backend,
    available_backends,
    set_default_backend,
)


@pytest.fixture(params=[NATIVE_BACKEND, GMP_BACKEND], ids=["native", "gmp"])
def backend(request):
    return request.param


class TestConvert(object):
    
    @pytest.mark.parametrize("value,exp", [
        (0, 0),
        (-123, -123),
        (True, 1),
        (2**100, 2**100),
        (np.uint64(2**64 - 1), 2**64 - 1),
        (np.int8(-128), -128),
        (gmpy2.mpz(-7), -7),
    ])
    def test_integral_values(self, backend, value, exp):
        out = backend.convert(value)
        assert type(out) is backend.integer_type
        assert out == exp
    
    @pytest.mark.parametrize("value", [
        1.0,
        np.float32(2.0),
        Fraction(1, 2),
        Decimal("3"),
        "123",
    ])
    def test_non_integral_values_rejected(self, backend, value):
        with pytest.raises(TypeError):
            backend.convert(value)
    
    def test_same_type_passed_through(self, backend):
        value = backend.from_int(1234)
        assert backend.convert(value) is value


class TestExplicitConvert(object):
    
    @pytest.mark.parametrize("value,exp", [
        (12, 12),
        (2.75, 2),
        (-2.75, -2),
        (Fraction(-7, 2), -3),
        (Decimal("9.99"), 9),
        ("0x10", 16),
        ("-42", -42),
    ])
    def test_conversions(self, backend, value, exp):
        out = backend.explicit_convert(value)
        assert type(out) is backend.integer_type
        assert out == exp
    
    def test_nan(self, backend):
        with pytest.raises(ValueError):
            backend.explicit_convert(float("nan"))
    
    def test_infinity(self, backend):
        with pytest.raises(OverflowError):
            backend.explicit_convert(float("inf"))


class TestParse(object):
    
    @pytest.mark.parametrize("string,exp", [
        ("0", 0),
        ("-0", 0),
        ("+17", 17),
        ("123456789012345678901234567890", 123456789012345678901234567890),
        ("-123", -123),
        # Hexadecimal
        ("0x10", 16),
        ("0XfF", 255),
        ("-0x1F", -31),
        # Octal
        ("010", 8),
        ("-0777", -511),
    ])
    def test_valid(self, backend, string, exp):
        out = backend.parse(string)
        assert type(out) is backend.integer_type
        assert out == exp
    
    @pytest.mark.parametrize("string", [
        "",
        "-",
        "+",
        "0x",
        "--1",
        "1-2",
        "12a",
        "ff",
        "08",
        "1_000",
        " 1",
    ])
    def test_invalid(self, backend, string):
        with pytest.raises(ValueError):
            backend.parse(string)


class TestFormat(object):
    
    @pytest.mark.parametrize("value,flags,exp", [
        (0, FormatFlags.NONE, "0"),
        (255, FormatFlags.NONE, "255"),
        (-255, FormatFlags.NONE, "-255"),
        (2**70, FormatFlags.NONE, "1180591620717411303424"),
        # Hex
        (255, FormatFlags.HEX, "ff"),
        (255, FormatFlags.HEX | FormatFlags.UPPERCASE, "FF"),
        (255, FormatFlags.HEX | FormatFlags.SHOWBASE, "0xff"),
        (255, FormatFlags.HEX | FormatFlags.SHOWBASE | FormatFlags.UPPERCASE, "0XFF"),
        (-255, FormatFlags.HEX | FormatFlags.SHOWBASE, "-0xff"),
        (0, FormatFlags.HEX | FormatFlags.SHOWBASE, "0"),
        # Octal
        (8, FormatFlags.OCT, "10"),
        (8, FormatFlags.OCT | FormatFlags.SHOWBASE, "010"),
        (-8, FormatFlags.OCT | FormatFlags.SHOWBASE, "-010"),
        # Hex takes priority over octal
        (16, FormatFlags.HEX | FormatFlags.OCT, "10"),
        # Showpos
        (12, FormatFlags.SHOWPOS, "+12"),
        (0, FormatFlags.SHOWPOS, "+0"),
        (-12, FormatFlags.SHOWPOS, "-12"),
        (10, FormatFlags.SHOWPOS | FormatFlags.HEX | FormatFlags.SHOWBASE, "+0xa"),
    ])
    def test_format(self, backend, value, flags, exp):
        assert backend.format(backend.from_int(value), 0, flags) == exp
    
    def test_digits_ignored(self, backend):
        assert backend.format(backend.from_int(1234), 2) == "1234"
    
    def test_accepts_plain_int_flags(self, backend):
        assert backend.format(backend.from_int(255), 0, int(FormatFlags.HEX)) == "ff"
    
    @pytest.mark.parametrize("value", [0, 1, -1, 12345, -2**80 + 3])
    @pytest.mark.parametrize("flags", [
        FormatFlags.NONE,
        FormatFlags.HEX | FormatFlags.SHOWBASE,
        FormatFlags.OCT | FormatFlags.SHOWBASE,
    ])
    def test_parse_inverts_format(self, backend, value, flags):
        value = backend.from_int(value)
        assert backend.parse(backend.format(value, 0, flags)) == value


class TestArithmeticHelpers(object):
    
    @pytest.mark.parametrize("a,b,exp", [
        (12, 18, 6),
        (-12, 18, 6),
        (12, -18, 6),
        (0, 5, 5),
        (0, -5, 5),
        (7, 13, 1),
    ])
    def test_gcd(self, backend, a, b, exp):
        assert backend.gcd(backend.from_int(a), backend.from_int(b)) == exp
    
    @pytest.mark.parametrize("a,b,exp", [
        (7, 2, 3),
        (-7, 2, -3),
        (7, -2, -3),
        (-7, -2, 3),
        (6, 3, 2),
        (0, 3, 0),
        (1, 3, 0),
        (-1, 3, 0),
    ])
    def test_truncating_divide(self, backend, a, b, exp):
        assert backend.truncating_divide(
            backend.from_int(a),
            backend.from_int(b),
        ) == exp
    
    @pytest.mark.parametrize("value,exp", [(-5, -1), (0, 0), (5, 1)])
    def test_sign(self, backend, value, exp):
        assert backend.sign(backend.from_int(value)) == exp
    
    def test_is_zero(self, backend):
        assert backend.is_zero(backend.from_int(0))
        assert not backend.is_zero(backend.from_int(-1))
    
    def test_hash_matches_int_hash(self, backend):
        assert backend.hash(backend.from_int(2**100 + 1)) == hash(2**100 + 1)


class TestRegistry(object):
    
    @pytest.fixture(autouse=True)
    def restore_default(self, monkeypatch):
        # Backends registered by these tests are discarded afterwards
        monkeypatch.setattr(
            integer_backends, "_backends", dict(integer_backends._backends))
        yield
        set_default_backend("native")
    
    def test_builtin_backends(self):
        assert get_backend("native") is NATIVE_BACKEND
        assert get_backend("gmp") is GMP_BACKEND
        assert set(["gmp", "native"]).issubset(available_backends())
    
    def test_default_backend(self):
        assert get_backend() is NATIVE_BACKEND
        set_default_backend("gmp")
        assert get_backend() is GMP_BACKEND
    
    def test_backend_instance_passed_through(self):
        assert get_backend(GMP_BACKEND) is GMP_BACKEND
    
    def test_unknown_backend(self):
        with pytest.raises(KeyError):
            get_backend("abacus")
        with pytest.raises(KeyError):
            set_default_backend("abacus")
    
    def test_register_backend(self):
        class DummyBackend(NativeIntegerBackend):
            name = "dummy"
        
        dummy = DummyBackend()
        register_backend(dummy)
        assert get_backend("dummy") is dummy
        assert "dummy" in available_backends()
    
    def test_unnamed_backend_rejected(self):
        with pytest.raises(ValueError):
            register_backend(IntegerBackend())
    
    def test_repr(self):
        assert repr(NATIVE_BACKEND) == "<NativeIntegerBackend 'native'>"


def test_registry_contains_only_builtin_backends():
    # Runs after TestRegistry: backends registered there must not persist
    assert available_backends() == ["gmp", "native"]
    assert get_backend() is NATIVE_BACKEND
