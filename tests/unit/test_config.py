"""Unit tests for TableConfig validation."""

import pytest
from pydantic import ValidationError

from csvtable.models import TableConfig


def test_defaults():
    config = TableConfig()
    assert config.delimiter is None
    assert config.quotechar == '"'
    assert config.sniff_limit == 1000
    assert config.header is True
    assert config.truncate is False
    assert config.width_limit is None


def test_max_field_size_modes():
    assert TableConfig(max_field_size=20).width_limit == 20
    assert TableConfig(max_field_size=20).truncate is False
    assert TableConfig(max_field_size=-8).width_limit == 8
    assert TableConfig(max_field_size=-8).truncate is True


@pytest.mark.parametrize("alias", ["\\t", "tab", "\t"])
def test_tab_aliases(alias):
    assert TableConfig(delimiter=alias).delimiter == "\t"


def test_delimiter_must_be_single_character():
    with pytest.raises(ValidationError, match="single character"):
        TableConfig(delimiter=";;")


def test_quotechar_must_be_single_character():
    with pytest.raises(ValidationError, match="single character"):
        TableConfig(quotechar="")


def test_delimiter_and_quotechar_differ():
    with pytest.raises(ValidationError, match="must differ"):
        TableConfig(delimiter="'", quotechar="'")


def test_negative_sniff_limit_rejected():
    with pytest.raises(ValidationError):
        TableConfig(sniff_limit=-1)


def test_unknown_encoding_rejected():
    with pytest.raises(ValidationError, match="Unknown encoding"):
        TableConfig(encoding="no-such-codec")


def test_config_is_frozen():
    config = TableConfig()
    with pytest.raises(ValidationError):
        config.header = False
