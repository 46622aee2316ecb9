def _banner(title: str):
    print("\n" + "=" * 12 + f" {title} " + "=" * 12)


# Stage 1: import self-check
def test_sanity_imports():
    """Verify that core submodules import without circular errors."""
    from bigmath.core import (
        BigNumber,
        BigInteger,
        BigDecimal,
        BigRational,
        NumericKind,
        Ordering,
        of,
        convert,
        compare,
        min_of,
        max_of,
        NUMBER_REGEX,
    )

    _banner("SANITY: imports")
    print("[DEBUG] Successfully imported all core symbols.")
    assert callable(of)
    assert callable(convert)
    assert callable(compare)
    assert callable(min_of) and callable(max_of)
    assert issubclass(BigInteger, BigNumber)
    assert issubclass(BigDecimal, BigNumber)
    assert issubclass(BigRational, BigNumber)
    assert NUMBER_REGEX.fullmatch("12.5e-3") is not None
    assert {k.value for k in NumericKind} == {"integer", "decimal", "rational"}
    assert [int(o) for o in Ordering] == [-1, 0, 1]


# Stage 2: top-level surface
def test_top_level_reexports_core():
    """The package root exposes the same objects as bigmath.core."""
    import bigmath
    import bigmath.core as core

    _banner("SANITY: top-level API")
    for name in bigmath.__all__:
        print(f"[DEBUG] bigmath.{name}")
        assert getattr(bigmath, name) is getattr(core, name)


# Stage 3: kinds are fixed per class
def test_kind_class_attributes():
    from bigmath.core import BigNumber, BigInteger, BigDecimal, BigRational, NumericKind

    _banner("SANITY: KIND")
    assert BigNumber.KIND is None
    assert BigInteger.KIND is NumericKind.INTEGER
    assert BigDecimal.KIND is NumericKind.DECIMAL
    assert BigRational.KIND is NumericKind.RATIONAL
