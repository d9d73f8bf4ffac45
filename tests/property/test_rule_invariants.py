"""Property-based tests for invariants shared by every rule kind."""

from __future__ import annotations

from hypothesis import given, seed, settings
from hypothesis import strategies as st

from fieldcheck import NIL_OR_NOT_EMPTY, REQUIRED, Ref, one_of, validate
from fieldcheck.formats import CATALOG

catalog_rule_strategy = st.sampled_from(sorted(CATALOG.items()))
message_strategy = st.text(min_size=1, max_size=20)
scalar_strategy = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(),
    st.text(max_size=30),
    st.lists(st.integers(), max_size=3),
)


@seed(5001)
@settings(max_examples=100, deadline=None)
@given(entry=catalog_rule_strategy, value=st.text(max_size=40))
def test_reference_validates_like_value(entry, value: str) -> None:
    """
    Property: Wrapping a value in Ref never changes the outcome of a rule.
    """
    _, rule = entry
    assert rule.validate(Ref(value)) == rule.validate(value)


@seed(5002)
@settings(max_examples=100, deadline=None)
@given(entry=catalog_rule_strategy, value=st.text(max_size=40))
def test_catalog_failures_carry_rule_tag(entry, value: str) -> None:
    """
    Property: A catalog rule either passes or fails with exactly its own tag.
    """
    _, rule = entry
    error = rule.validate(value)
    assert error is None or str(error) == rule.message


@seed(5003)
@settings(max_examples=50, deadline=None)
@given(entry=catalog_rule_strategy)
def test_catalog_rules_accept_empty_and_absent(entry) -> None:
    """
    Property: Non-presence rules never reject empty or absent values.
    """
    _, rule = entry
    for value in ("", None, Ref(None), Ref(""), b""):
        assert rule.validate(value) is None


@seed(5004)
@settings(max_examples=100, deadline=None)
@given(entry=catalog_rule_strategy, message=message_strategy, value=st.text(max_size=40))
def test_custom_message_leaves_original_untouched(entry, message: str, value: str) -> None:
    """
    Property: error() returns a new rule; the original keeps its tag.
    """
    _, rule = entry
    original_message = rule.message
    custom = rule.error(message)

    assert rule.message == original_message
    original_error = rule.validate(value)
    custom_error = custom.validate(value)
    assert (original_error is None) == (custom_error is None)
    if custom_error is not None:
        assert str(custom_error) == message


@seed(5005)
@settings(max_examples=100, deadline=None)
@given(value=scalar_strategy)
def test_required_and_nil_or_not_empty_agree_on_present_values(value) -> None:
    """
    Property: The presence rules only differ on absent values.
    """
    required = REQUIRED.validate(value)
    nil_or_not_empty = NIL_OR_NOT_EMPTY.validate(value)

    if value is None:
        assert required is not None
        assert nil_or_not_empty is None
    else:
        assert (required is None) == (nil_or_not_empty is None)


@seed(5006)
@settings(max_examples=100, deadline=None)
@given(elements=st.lists(st.integers(), max_size=5), value=st.integers())
def test_membership_matches_python_in(elements: list[int], value: int) -> None:
    """
    Property: one_of accepts a present value exactly when it is among the elements.
    """
    error = one_of(*elements).validate(value)

    if value == 0 or value in elements:
        assert error is None
    else:
        assert error is not None
        assert str(error).startswith("in|[")


@seed(5007)
@settings(max_examples=100, deadline=None)
@given(value=scalar_strategy)
def test_validate_without_rules_passes_plain_values(value) -> None:
    """
    Property: validate() with no rules accepts any value that is not self-validating.
    """
    assert validate(value) is None
