"""Property-based tests for platform version ordering and the gate.

- Ordering agrees with zero-padded component tuples.
- Every version at or below 1.419.99 is rejected; everything above accepted.
- The companion version is "2.0" exactly when the version is >= 1.533.
"""
from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from jpiconfig.core.version import (
    COMPANION_SWITCH_VERSION,
    MAX_UNSUPPORTED_VERSION,
    PlatformVersion,
    companion_version_for,
    is_supported,
)

components = st.lists(st.integers(min_value=0, max_value=700), min_size=1, max_size=4)


def _text(parts: list[int]) -> str:
    return ".".join(str(p) for p in parts)


def _padded(parts: list[int]) -> tuple[int, ...]:
    return tuple(parts) + (0,) * (4 - len(parts))


@given(a=components, b=components)
def test_ordering_matches_padded_tuples(a: list[int], b: list[int]) -> None:
    va, vb = PlatformVersion.parse(_text(a)), PlatformVersion.parse(_text(b))
    assert (va < vb) == (_padded(a) < _padded(b))
    assert (va == vb) == (_padded(a) == _padded(b))


@given(parts=components)
def test_roundtrip_keeps_raw_text(parts: list[int]) -> None:
    assert str(PlatformVersion.parse(_text(parts))) == _text(parts)


@given(minor=st.integers(min_value=0, max_value=2000), patch=st.integers(min_value=0, max_value=200))
def test_support_threshold(minor: int, patch: int) -> None:
    version = PlatformVersion.parse(f"1.{minor}.{patch}")
    assert is_supported(version) == (version > MAX_UNSUPPORTED_VERSION)
    assert is_supported(version) == ((minor, patch) > (419, 99))


@given(minor=st.integers(min_value=420, max_value=2000))
def test_companion_switch(minor: int) -> None:
    version = PlatformVersion.parse(f"1.{minor}")
    companion = companion_version_for(version)
    if version >= COMPANION_SWITCH_VERSION:
        assert companion == "2.0"
    else:
        assert companion == f"1.{minor}"
