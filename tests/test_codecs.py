"""
Tests for the numeric and JSON codecs.
"""

from repobadge.domain.errors import ParseError, SerialError
from repobadge.domain.result import Err, Ok
from repobadge.infrastructure.codecs import decode_json, encode_json, parse_int


class TestParseInt:
    """Tests for parse_int."""

    def test_parses_count(self) -> None:
        """Surrounding whitespace from command output is ignored."""
        assert parse_int(" 1337\n") == Ok(1337)

    def test_invalid_number_is_parse_error(self) -> None:
        """Non-numeric text yields a Parse error wrapping the ValueError."""
        result = parse_int("12a")
        assert result.is_err()
        assert isinstance(result.error, ParseError)
        assert isinstance(result.error.source, ValueError)
        assert str(result.error).startswith("Parse(")


class TestDecodeJson:
    """Tests for decode_json."""

    def test_decodes_document(self) -> None:
        assert decode_json('{"count": 3}') == Ok({"count": 3})

    def test_truncated_document_is_serial_error(self) -> None:
        result = decode_json('{"count": ')
        assert isinstance(result, Err)
        assert isinstance(result.error, SerialError)

    def test_undecodable_bytes_are_serial_error(self) -> None:
        """Invalid UTF-8 is a serialization failure, not a parse failure."""
        result = decode_json(b'{"a": "\xff"}')
        assert isinstance(result.error, SerialError)


class TestEncodeJson:
    """Tests for encode_json."""

    def test_encodes_compactly(self) -> None:
        assert encode_json({"a": [1, 2]}) == Ok('{"a":[1,2]}')

    def test_unserializable_value_is_serial_error(self) -> None:
        result = encode_json({"when": object()})
        assert isinstance(result.error, SerialError)
        assert isinstance(result.error.source, TypeError)

    def test_circular_reference_is_serial_error(self) -> None:
        value: list = []
        value.append(value)
        assert isinstance(encode_json(value).error, SerialError)
