"""Property-based tests for classpath composition.

Verifies the set-subtraction laws the runtime classpath relies on:
- Exclusion-order independence: compose(B, [E1, E2]) == compose(B, [E2, E1])
- Identity: compose(B, []) == B
- Idempotence: re-running with the same inputs gives the same set
- Soundness: no excluded entry survives, no surviving entry is new
"""
from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from jpiconfig.core.classpath import ClasspathSet, compose

jar_names = st.sampled_from([
    "jenkins-core.jar", "servlet-api.jar", "groovy-all.jar", "guava.jar",
    "commons-io.jar", "plugin.jar", "stapler.jar", "asm.jar",
])

classpaths = st.lists(jar_names, max_size=10)


@given(base=classpaths, first=classpaths, second=classpaths)
def test_exclusion_order_independent(base: list[str], first: list[str], second: list[str]) -> None:
    assert compose(base, [first, second]) == compose(base, [second, first])


@given(base=classpaths)
def test_empty_exclusions_is_identity(base: list[str]) -> None:
    assert compose(base, []) == ClasspathSet(base)


@given(base=classpaths, exclusions=st.lists(classpaths, max_size=3))
def test_idempotent(base: list[str], exclusions: list[list[str]]) -> None:
    assert compose(base, exclusions) == compose(base, exclusions)


@given(base=classpaths, exclusions=st.lists(classpaths, max_size=3))
def test_result_is_filtered_base(base: list[str], exclusions: list[list[str]]) -> None:
    result = compose(base, exclusions)
    excluded = {entry for group in exclusions for entry in group}
    assert not any(entry in excluded for entry in result)
    expected = [e for e in dict.fromkeys(base) if e not in excluded]
    assert result.to_list() == expected


@given(base=classpaths, exclusions=st.lists(classpaths, max_size=3))
def test_inputs_unchanged(base: list[str], exclusions: list[list[str]]) -> None:
    base_copy = list(base)
    exclusions_copy = [list(group) for group in exclusions]
    compose(base, exclusions)
    assert base == base_copy
    assert exclusions == exclusions_copy
