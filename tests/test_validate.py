"""Unit tests for PropertiesValidator."""
from __future__ import annotations

import pytest

from explorerql.errors import (
    DisallowedMatchRuleError,
    InvalidFilterClauseError,
    InvalidIdentifierError,
    UnknownFieldError,
    UnsupportedAggregationError,
    ValidationError,
)
from explorerql.schema.filters import Filter, FilterClause, QueryProperties
from explorerql.schema.profile import QueryProfile
from explorerql.validate.validator import PropertiesValidator


def _field(name: str, *clauses: FilterClause) -> QueryProperties:
    return QueryProperties(field_filters=[Filter(field_name=name, filter_clauses=list(clauses))])


def _meta(name: str, *clauses: FilterClause) -> QueryProperties:
    return QueryProperties(
        metadata_filters=[Filter(field_name=name, filter_clauses=list(clauses))]
    )


def test_dashboard_valid(dashboard, catalog):
    PropertiesValidator(catalog=catalog).validate(dashboard, ["samples"])


def test_no_catalog_only_checks_shape(dashboard):
    PropertiesValidator().validate(dashboard)


def test_invalid_field_identifier():
    with pytest.raises(InvalidIdentifierError) as exc_info:
        PropertiesValidator().validate(_field("a; DROP TABLE samples"))
    assert exc_info.value.code == "INVALID_IDENTIFIER"
    assert exc_info.value.details["kind"] == "field"


def test_qualified_field_identifier_allowed(catalog):
    PropertiesValidator(catalog=catalog).validate(_field("samples.value"), ["samples"])


def test_unknown_field(catalog):
    with pytest.raises(UnknownFieldError) as exc_info:
        PropertiesValidator(catalog=catalog).validate(_field("ghost"))
    assert exc_info.value.code == "UNKNOWN_FIELD"
    assert "product_name" in exc_info.value.details["allowed"]


def test_field_outside_from_tables(catalog):
    PropertiesValidator(catalog=catalog).validate(_field("official"))
    with pytest.raises(UnknownFieldError):
        PropertiesValidator(catalog=catalog).validate(_field("official"), ["samples"])


def test_invalid_metadata_key():
    with pytest.raises(InvalidIdentifierError) as exc_info:
        PropertiesValidator().validate(_meta("os|zone"))
    assert exc_info.value.details["kind"] == "metadata key"


def test_unknown_metadata_key(catalog):
    with pytest.raises(UnknownFieldError) as exc_info:
        PropertiesValidator(catalog=catalog).validate(_meta("kernel"))
    assert exc_info.value.details["allowed"] == [
        "os",
        "zone",
        "machine_type",
        "cloud-provider",
    ]


def test_metadata_keys_unrestricted_when_catalog_lists_none(catalog):
    open_catalog = catalog.model_copy(update={"metadata_keys": []})
    PropertiesValidator(catalog=open_catalog).validate(_meta("kernel"))


def test_disallowed_match_rule():
    profile = QueryProfile.builder().match_rules(["="]).build()
    props = _field("x", FilterClause(match_rule="LIKE", match_on=["%a%"]))
    with pytest.raises(DisallowedMatchRuleError) as exc_info:
        PropertiesValidator(profile).validate(props)
    assert exc_info.value.details["allowed_match_rules"] == ["="]


def test_match_rule_case_insensitive():
    props = _field("x", FilterClause(match_rule="like", match_on=["%a%"]))
    PropertiesValidator().validate(props)


def test_empty_match_on():
    props = _meta("os", FilterClause(match_rule="="))
    with pytest.raises(InvalidFilterClauseError) as exc_info:
        PropertiesValidator().validate(props)
    assert exc_info.value.clause_index == 0


def test_unsupported_aggregation():
    with pytest.raises(UnsupportedAggregationError) as exc_info:
        PropertiesValidator().validate(QueryProperties(aggregations=["median"]))
    assert exc_info.value.details["aggregation"] == "median"


def test_aggregation_case_insensitive():
    PropertiesValidator().validate(QueryProperties(aggregations=["Sum", "avg"]))


def test_error_response_shape():
    with pytest.raises(ValidationError) as exc_info:
        PropertiesValidator().validate(QueryProperties(aggregations=["median"]))
    response = exc_info.value.to_error_response()
    assert response["error"] == "UNSUPPORTED_AGGREGATION"
    assert "median" in response["message"]
    assert response["details"]["aggregation"] == "median"


def test_field_filters_checked_before_aggregations():
    props = QueryProperties(
        field_filters=[Filter(field_name="1bad")],
        aggregations=["median"],
    )
    with pytest.raises(InvalidIdentifierError):
        PropertiesValidator().validate(props)
