import json

import pytest

from lambda_client.core.utils import (
    camelize_keys,
    parse_gateway_response,
    stringify_value,
    to_json,
    to_string_hash,
)


class TestToStringHash:
    def test_drops_empty_values(self):
        assert to_string_hash({"a": "x", "b": "", "c": None}) == {"a": "x"}

    def test_stringifies_values(self):
        assert to_string_hash({"n": 1, "f": 1.5, "t": True, "z": 0}) == {
            "n": "1",
            "f": "1.5",
            "t": "true",
            "z": "0",
        }

    def test_none_mapping(self):
        assert to_string_hash(None) == {}


@pytest.mark.parametrize(
    "value, expected", [(None, ""), (False, "false"), ("abc", "abc"), (42, "42")]
)
def test_stringify_value(value, expected):
    assert stringify_value(value) == expected


def test_to_json_is_compact():
    assert to_json({"a": [1, 2], "b": "é"}) == '{"a":[1,2],"b":"é"}'


class TestCamelizeKeys:
    def test_snake_to_camel(self):
        assert camelize_keys({"user_id": 5, "created_at": "x"}) == {"userId": 5, "createdAt": "x"}

    @pytest.mark.parametrize(
        "key, expected",
        [
            ("sha256sum", "sha256sum"),
            ("PascalCase", "pascalCase"),
            ("user_ID", "userID"),
            ("content-type", "contentType"),
            ("user_id", "userId"),
        ],
    )
    def test_inner_capitals_are_preserved(self, key, expected):
        assert camelize_keys({key: 1}) == {expected: 1}

    def test_already_camel_is_untouched(self):
        assert camelize_keys({"userId": 5, "name": "a"}) == {"userId": 5, "name": "a"}

    def test_recurses_into_lists_and_dicts(self):
        data = {"items": [{"item_id": 1, "tags": ["snake_value"]}], "meta_info": {"page_no": 2}}

        assert camelize_keys(data) == {
            "items": [{"itemId": 1, "tags": ["snake_value"]}],
            "metaInfo": {"pageNo": 2},
        }

    @pytest.mark.parametrize("value", [None, 1, "snake_case", [1, 2]])
    def test_scalars_pass_through(self, value):
        assert camelize_keys(value) == value


class TestParseGatewayResponse:
    def test_parses_json_body(self):
        assert parse_gateway_response({"statusCode": 200, "body": '{"a": 1}'}) == {"a": 1}

    def test_missing_body_is_none(self):
        assert parse_gateway_response({"statusCode": 204}) is None

    def test_missing_response_is_none(self):
        assert parse_gateway_response(None) is None

    def test_null_body_is_none(self):
        assert parse_gateway_response({"statusCode": 200, "body": "null"}) is None

    def test_invalid_json_raises(self):
        with pytest.raises(json.JSONDecodeError):
            parse_gateway_response({"statusCode": 500, "body": "oops"})

    def test_non_string_body_is_returned(self):
        assert parse_gateway_response({"statusCode": 200, "body": 5}) == 5

    def test_only_body_is_read(self):
        response = {"statusCode": None, "isBase64Encoded": "no", "body": '{"a_b": 1}'}

        assert parse_gateway_response(response) == {"a_b": 1}

    def test_null_headers_are_accepted(self):
        assert parse_gateway_response({"statusCode": 200, "headers": None, "body": "[1]"}) == [1]
