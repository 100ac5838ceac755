from eshop_testing.json_matchers import (
    MatcherResult,
    contain_exactly_key_value_pairs,
    contain_json_key,
    contain_json_key_value,
    json_equal,
    match_json,
    match_json_resource,
    representation,
    should,
    should_contain_exactly,
    should_contain_json_key,
    should_contain_json_key_and_value_of_type,
    should_contain_json_key_value,
    should_contain_only_json_key,
    should_contain_only_json_key_of_type,
    should_match_json,
    should_match_json_resource,
    should_not,
    should_not_contain_exactly,
    should_not_contain_json_key,
    should_not_contain_json_key_value,
    should_not_match_json,
    should_not_match_json_resource,
)

__all__ = [
    "MatcherResult",
    "contain_exactly_key_value_pairs",
    "contain_json_key",
    "contain_json_key_value",
    "json_equal",
    "match_json",
    "match_json_resource",
    "representation",
    "should",
    "should_contain_exactly",
    "should_contain_json_key",
    "should_contain_json_key_and_value_of_type",
    "should_contain_json_key_value",
    "should_contain_only_json_key",
    "should_contain_only_json_key_of_type",
    "should_match_json",
    "should_match_json_resource",
    "should_not",
    "should_not_contain_exactly",
    "should_not_contain_json_key",
    "should_not_contain_json_key_value",
    "should_not_match_json",
    "should_not_match_json_resource",
]
