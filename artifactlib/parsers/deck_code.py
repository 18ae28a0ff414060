"""
Artifact deck code encoding and decoding.

Format reference: https://github.com/ValveSoftware/ArtifactDeckCode

A deck code is "ADC" followed by URL-safe-ish base64 ('/' -> '-',
'=' -> '_') of:

    byte 0      version << 4 | hero count (3 bits + continue bit)
    byte 1      checksum: sum of card bytes & 0xFF
    byte 2      deck name length (version 2 only)
    ...         remaining hero count bits, heroes, then cards
    ...         deck name (UTF-8)

Heroes and cards are sorted by id and stored as id deltas. Each entry's
header byte holds a 2-bit count (or turn for heroes) and the low 5 bits
of the delta; larger values spill into 7-bit continuation bytes.
"""

import base64
import binascii
import re

from artifactlib.errors import DeckCodeError
from artifactlib.models.deck import DecodedCard, DecodedDeck, DecodedHero

DECK_CODE_PREFIX = "ADC"
DECK_CODE_VERSION = 2

HEADER_SIZE = 3
MAX_NAME_BYTES = 63

# Counts 1-3 fit in the header byte; 4+ are written after the id
_MAX_INLINE_COUNT = 3

_HTML_TAG_PATTERN = re.compile(r"<[^>]*>")


class _ByteReader:
    """Cursor over the card section of a decoded deck code."""

    def __init__(self, data: bytes, start: int, end: int) -> None:
        self.data = data
        self.index = start
        self.end = end

    def at_end(self) -> bool:
        return self.index >= self.end

    def read_byte(self) -> int:
        if self.at_end():
            raise DeckCodeError("Deck code is truncated")
        value = self.data[self.index]
        self.index += 1
        return value

    def read_var_uint(self, base_value: int, base_bits: int) -> int:
        """Read a value whose low `base_bits` bits live in `base_value`."""
        value = 0
        shift = 0
        if base_bits:
            continue_bit = 1 << base_bits
            value = base_value & (continue_bit - 1)
            if not base_value & continue_bit:
                return value
            shift = base_bits

        while True:
            chunk = self.read_byte()
            value |= (chunk & 0x7F) << shift
            if not chunk & 0x80:
                return value
            shift += 7

    def read_card(self, previous_id: int) -> tuple[int, int]:
        """Read one entry, returning (card_id, count)."""
        header = self.read_byte()
        inline_count = header >> 6
        card_id = previous_id + self.read_var_uint(header, 5)
        if inline_count == _MAX_INLINE_COUNT:
            count = self.read_var_uint(0, 0)
        else:
            count = inline_count + 1
        return card_id, count


def _clean_name(name: str) -> str:
    return _HTML_TAG_PATTERN.sub("", name).strip()


def decode_deck_code(code: str) -> DecodedDeck:
    """
    Decode an Artifact deck code.

    Args:
        code: Deck code string starting with "ADC"

    Returns:
        DecodedDeck with heroes and cards in code order (ascending id)

    Raises:
        DeckCodeError: If the code is malformed or fails its checksum
    """
    code = code.strip()
    if not code.startswith(DECK_CODE_PREFIX):
        raise DeckCodeError(f"Deck code must start with {DECK_CODE_PREFIX!r}")

    payload = code[len(DECK_CODE_PREFIX) :].replace("-", "/").replace("_", "=")
    try:
        data = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise DeckCodeError(f"Deck code is not valid base64: {e}") from e

    return decode_deck_bytes(data)


def decode_deck_bytes(data: bytes) -> DecodedDeck:
    """Decode the binary payload of a deck code."""
    if len(data) < 2:
        raise DeckCodeError("Deck code is too short")

    version_and_heroes = data[0]
    version = version_and_heroes >> 4
    if version not in (1, DECK_CODE_VERSION):
        raise DeckCodeError(f"Unsupported deck code version: {version}")

    checksum = data[1]
    start = 2
    name_length = 0
    if version > 1:
        if len(data) < HEADER_SIZE:
            raise DeckCodeError("Deck code is too short")
        name_length = data[2]
        start = HEADER_SIZE

    card_bytes_end = len(data) - name_length
    if card_bytes_end < start:
        raise DeckCodeError("Deck name length exceeds deck code size")

    computed = sum(data[start:card_bytes_end]) & 0xFF
    if computed != checksum:
        raise DeckCodeError(f"Checksum mismatch: expected {checksum}, computed {computed}")

    reader = _ByteReader(data, start, card_bytes_end)
    hero_count = reader.read_var_uint(version_and_heroes, 3)

    heroes: list[DecodedHero] = []
    previous_id = 0
    for _ in range(hero_count):
        card_id, turn = reader.read_card(previous_id)
        heroes.append(DecodedHero(id=card_id, turn=turn))
        previous_id = card_id

    cards: list[DecodedCard] = []
    previous_id = 0
    while not reader.at_end():
        card_id, count = reader.read_card(previous_id)
        cards.append(DecodedCard(id=card_id, count=count))
        previous_id = card_id

    name = ""
    if name_length:
        name = _clean_name(data[card_bytes_end:].decode("utf-8", errors="replace"))

    return DecodedDeck(name=name, heroes=heroes, cards=cards)


# =============================================================================
# ENCODING
# =============================================================================


def _bits_with_carry(value: int, num_bits: int) -> int:
    """Low `num_bits` of value, plus the continue bit if more bits remain."""
    limit_bit = 1 << num_bits
    result = value & (limit_bit - 1)
    if value >= limit_bit:
        result |= limit_bit
    return result


def _write_remaining(buffer: bytearray, value: int, written_bits: int) -> None:
    value >>= written_bits
    while value > 0:
        buffer.append(_bits_with_carry(value, 7))
        value >>= 7


def _write_card(buffer: bytearray, count: int, delta: int) -> None:
    extended = count - 1 >= _MAX_INLINE_COUNT
    inline_count = _MAX_INLINE_COUNT if extended else count - 1
    buffer.append((inline_count << 6) | _bits_with_carry(delta, 5))
    _write_remaining(buffer, delta, 5)
    if extended:
        _write_remaining(buffer, count, 0)


def _encode_name(name: str) -> bytes:
    name = _clean_name(name)
    encoded = name.encode("utf-8")
    while len(encoded) > MAX_NAME_BYTES:
        name = name[:-1]
        encoded = name.encode("utf-8")
    return encoded


def encode_deck_code(deck: DecodedDeck) -> str:
    """
    Encode a deck as an Artifact deck code.

    Heroes and cards are written in ascending id order. The deck name is
    stripped of HTML tags and truncated to 63 UTF-8 bytes.

    Raises:
        DeckCodeError: If any entry has a non-positive count or turn
    """
    heroes = sorted(deck.heroes, key=lambda hero: hero.id)
    cards = sorted(deck.cards, key=lambda card: card.id)

    for hero in heroes:
        if hero.turn < 1:
            raise DeckCodeError(f"Hero {hero.id} has invalid turn {hero.turn}")
    for card in cards:
        if card.count < 1:
            raise DeckCodeError(f"Card {card.id} has invalid count {card.count}")

    name = _encode_name(deck.name)

    buffer = bytearray()
    buffer.append((DECK_CODE_VERSION << 4) | _bits_with_carry(len(heroes), 3))
    buffer.append(0)  # checksum, filled in below
    buffer.append(len(name))
    _write_remaining(buffer, len(heroes), 3)

    previous_id = 0
    for hero in heroes:
        _write_card(buffer, hero.turn, hero.id - previous_id)
        previous_id = hero.id

    previous_id = 0
    for card in cards:
        _write_card(buffer, card.count, card.id - previous_id)
        previous_id = card.id

    buffer[1] = sum(buffer[HEADER_SIZE:]) & 0xFF
    buffer.extend(name)

    encoded = base64.b64encode(bytes(buffer)).decode("ascii")
    return DECK_CODE_PREFIX + encoded.replace("/", "-").replace("=", "_")
