from __future__ import annotations

import pytest

from compactid.config import DEFAULT_ALPHABET, CodecConfig, load_config
from compactid.exceptions import ConfigurationError


def test_defaults() -> None:
    config = CodecConfig()
    assert config.alphabet == DEFAULT_ALPHABET
    assert config.min_length == 0
    assert config.blocklist is None


def test_from_env_reads_prefixed_variables() -> None:
    config = CodecConfig.from_env(
        {
            "COMPACTID_ALPHABET": "abcdefghij",
            "COMPACTID_MIN_LENGTH": " 12 ",
            "COMPACTID_BLOCKLIST": "foo, bar,,",
        }
    )
    assert config == CodecConfig(alphabet="abcdefghij", min_length=12, blocklist=("foo", "bar"))


def test_from_env_supports_custom_prefix_and_defaults() -> None:
    assert CodecConfig.from_env({}, prefix="IDS_") == CodecConfig()
    assert CodecConfig.from_env({"IDS_MIN_LENGTH": "4"}, prefix="IDS_").min_length == 4


def test_from_env_rejects_non_integer_length() -> None:
    with pytest.raises(ConfigurationError, match="MIN_LENGTH"):
        CodecConfig.from_env({"COMPACTID_MIN_LENGTH": "ten"})


def test_load_config_decodes_json() -> None:
    config = load_config(b'{"alphabet": "0123456789abcdef", "min_length": 8, "blocklist": []}')
    assert config == CodecConfig(alphabet="0123456789abcdef", min_length=8, blocklist=())


@pytest.mark.parametrize("payload", [b"not json", b'{"min_length": "eight"}', b"[]"])
def test_load_config_rejects_invalid_documents(payload: bytes) -> None:
    with pytest.raises(ConfigurationError):
        load_config(payload)


def test_config_is_immutable() -> None:
    config = CodecConfig()
    with pytest.raises(AttributeError):
        config.min_length = 3  # type: ignore[misc]
