"""
Binary deck codec: a compact, size-tiered encoding of an ordered card sequence.

Wire format:

    [size prefix][bitstream]

    size prefix  number of cards, big-endian unsigned, 1/2/4 bytes by tier
    bitstream    each card's 6-bit code (see engine.cards), MSB first, packed
                 contiguously; the last byte is zero-padded on its low bits

There is no version byte, magic number or checksum. The prefix width is
chosen from the card count when encoding, but from the total byte length when
decoding, because the width must be known before the count can be read:

    Tier    width   encode: cards <=    decode: bytes <=
    BIT8    1       255                 193
    BIT16   2       65,535              49,154
    BIT32   4       4,294,967,295       3,221,225,476

A decode limit is the largest buffer its tier can produce:
width + ceil(6 * encode_limit / 8). The smallest buffer of the next tier is
always larger, so byte length alone identifies the tier.

Examples:
    >>> from card_dealer.engine.cards import parse_cards
    >>> encode(Deck(parse_cards('As Td')))
    b'\\x02\\xcdP'
    >>> decode(b'\\x02\\xcdP').to_list()
    ['As', 'Td']
"""

from __future__ import annotations

import logging
import struct
from enum import Enum
from typing import Sized

import numpy as np

from ..engine.cards import CODE_BITS, CODE_TABLE, NUM_CARDS, card_code
from ..engine.deck import Deck
from ..engine.errors import BufferTooLarge, SequenceTooLarge, TruncatedBuffer, UnknownCode

logger = logging.getLogger(__name__)


def bitstream_size(num_cards: int) -> int:
    """Return the number of bytes holding ``num_cards`` packed 6-bit codes.

    Examples:
        >>> bitstream_size(52)
        39
        >>> bitstream_size(11)   # 66 bits -> 9 bytes, 6 pad bits
        9
    """
    return (num_cards * CODE_BITS + 7) // 8


# ─── Size tiers ───────────────────────────────────────────────────────────────

class Tier(Enum):
    """Size-prefix tier: (prefix width in bytes, struct code, max card count)."""

    BIT8 = (1, 'B', 0xFF)
    BIT16 = (2, 'H', 0xFFFF)
    BIT32 = (4, 'I', 0xFFFFFFFF)

    def __init__(self, prefix_width: int, struct_code: str, encode_limit: int) -> None:
        self.prefix_width = prefix_width
        self.struct_format = '>' + struct_code
        self.encode_limit = encode_limit
        self.decode_limit = prefix_width + bitstream_size(encode_limit)


ENCODE_LIMIT: int = Tier.BIT32.encode_limit
DECODE_LIMIT: int = Tier.BIT32.decode_limit


def tier_for_size(num_cards: int) -> Tier:
    """Pick the encoding tier for a deck of ``num_cards`` cards.

    Raises:
        SequenceTooLarge: If the count exceeds the 32-bit tier.

    Examples:
        >>> tier_for_size(255)
        <Tier.BIT8: (1, 'B', 255)>
        >>> tier_for_size(256)
        <Tier.BIT16: (2, 'H', 65535)>
    """
    for tier in Tier:
        if num_cards <= tier.encode_limit:
            return tier
    raise SequenceTooLarge(f"Deck size {num_cards} is too large to encode.")


def tier_for_bytesize(bytesize: int) -> Tier:
    """Pick the decoding tier for an encoded buffer of ``bytesize`` bytes.

    Raises:
        BufferTooLarge: If the length exceeds the 32-bit tier's decode limit.
    """
    for tier in Tier:
        if bytesize <= tier.decode_limit:
            return tier
    raise BufferTooLarge(f"Encoded deck size {bytesize} is too large to decode.")


def encoded_size(num_cards: int) -> int:
    """Return the exact length of ``encode`` output for ``num_cards`` cards.

    Examples:
        >>> encoded_size(52)
        40
        >>> encoded_size(52_000)
        39002
    """
    return tier_for_size(num_cards).prefix_width + bitstream_size(num_cards)


# ─── Encode / decode ──────────────────────────────────────────────────────────

def encode(deck: Sized) -> bytes:
    """Encode an ordered card sequence into bytes.

    The tier is chosen from ``len(deck)`` before any card is read, so an
    oversized sequence fails without being iterated. The deck is not modified.

    Args:
        deck: A Deck, or any sized iterable of Card.

    Raises:
        SequenceTooLarge: If the deck has more than 4,294,967,295 cards.
        UnknownCard: If an element is not a Card.
    """
    num_cards = len(deck)
    tier = tier_for_size(num_cards)

    codes = np.fromiter((card_code(card) for card in deck), dtype=np.uint8, count=num_cards)
    # (n, 8) bit rows, keep the low 6 bits of each code
    bits = np.unpackbits(codes[:, np.newaxis], axis=1)[:, 8 - CODE_BITS:]
    bitstream = np.packbits(bits.reshape(-1)).tobytes()

    logger.debug("Encoded %d cards with tier %s into %d bytes",
                 num_cards, tier.name, tier.prefix_width + len(bitstream))
    return struct.pack(tier.struct_format, num_cards) + bitstream


def decode(data: bytes) -> Deck:
    """Decode bytes produced by ``encode`` into a new Deck.

    Exactly as many 6-bit groups as the size prefix declares are read;
    trailing pad bits are ignored.

    Args:
        data: bytes, bytearray or memoryview.

    Raises:
        BufferTooLarge: If the buffer is longer than any tier can produce.
        TruncatedBuffer: If the buffer ends inside the size prefix or before
                         the declared number of cards.
        UnknownCode: If a group holds one of the unused codes 52–63.
    """
    bytesize = len(data)
    tier = tier_for_bytesize(bytesize)
    if bytesize < tier.prefix_width:
        raise TruncatedBuffer(f"Encoded deck of {bytesize} bytes has no size prefix.")

    (num_cards,) = struct.unpack_from(tier.struct_format, data)
    num_bits = num_cards * CODE_BITS
    available_bits = (bytesize - tier.prefix_width) * 8
    if num_bits > available_bits:
        logger.warning("Rejected truncated deck: %d cards declared, %d bits present",
                       num_cards, available_bits)
        raise TruncatedBuffer(
            f"Encoded deck declares {num_cards} cards but holds only {available_bits} bits."
        )
    if num_cards == 0:
        return Deck()

    payload = np.frombuffer(data, dtype=np.uint8, offset=tier.prefix_width)
    groups = np.unpackbits(payload)[:num_bits].reshape(num_cards, CODE_BITS)
    # packbits pads each 6-bit row on the right to a full byte
    codes = np.packbits(groups, axis=1)[:, 0] >> (8 - CODE_BITS)

    unknown = np.flatnonzero(codes >= NUM_CARDS)
    if unknown.size:
        position = int(unknown[0])
        logger.warning("Rejected deck with unknown card code %d at position %d",
                       codes[position], position)
        raise UnknownCode(f"Unknown card code {codes[position]} at position {position}.")

    logger.debug("Decoded %d cards with tier %s from %d bytes", num_cards, tier.name, bytesize)
    return Deck([CODE_TABLE[code] for code in codes.tolist()])
