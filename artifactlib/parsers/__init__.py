from artifactlib.parsers.deck_code import (
    DECK_CODE_PREFIX,
    DECK_CODE_VERSION,
    decode_deck_bytes,
    decode_deck_code,
    encode_deck_code,
)

__all__ = [
    "DECK_CODE_PREFIX",
    "DECK_CODE_VERSION",
    "decode_deck_bytes",
    "decode_deck_code",
    "encode_deck_code",
]
