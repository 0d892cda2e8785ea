"""Convert ULIDs to compact sqids strings and back."""

from .codec import IdentifierCodec, codec_for, decode_identifier, encode_identifier
from .config import CodecConfig, load_config
from .encoders import IntegerListEncoder, build_encoder
from .exceptions import CompactIdError, ConfigurationError, InvalidIdentifier, MalformedCompactId

__all__ = [
    "CodecConfig",
    "CompactIdError",
    "ConfigurationError",
    "IdentifierCodec",
    "IntegerListEncoder",
    "InvalidIdentifier",
    "MalformedCompactId",
    "build_encoder",
    "codec_for",
    "decode_identifier",
    "encode_identifier",
    "load_config",
]
