"""Domain Types - verifies enum values and identity wrappers.

Tests:
    - IndividualId wraps str
    - NotFoundPolicy / StoreBackend values match their env-var spelling
    - BodyEncoding.strict is true only for JSON
"""

from roster.core.domain_types import (
    BodyEncoding, IndividualId, NotFoundPolicy, StoreBackend,
)


def test_individual_id_wraps_str():
    assert IndividualId("abc") == "abc"


def test_not_found_policy_values():
    assert NotFoundPolicy("error") is NotFoundPolicy.ERROR
    assert NotFoundPolicy("null") is NotFoundPolicy.NULL


def test_store_backend_values():
    assert {b.value for b in StoreBackend} == {"sql", "memory"}


def test_only_json_bodies_validate_strictly():
    assert BodyEncoding.JSON.strict
    assert not BodyEncoding.FORM.strict
