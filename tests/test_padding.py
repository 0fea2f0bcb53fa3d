"""
Unit tests for message preprocessing.

Tests:
- BitPacker (bytes <-> bits)
- Padder (zero count, length field byte order)
- BlockSplitter (block count, word extraction)
"""

import pytest

from digestkit.core_crypto.bits import (
    BLOCK_BITS, InvariantError, to_bits, bits_to_bytes, zero_padding_length,
    encode_length, decode_length, pad_bits, pad_message, block_count,
    split_blocks, block_words,
)


class TestBitPacker:
    """Tests for byte to bit conversion."""

    def test_single_bytes(self):
        assert to_bits(b"a") == "01100001"
        assert to_bits(b"b") == "01100010"
        assert to_bits(b"c") == "01100011"

    def test_msb_first(self):
        assert to_bits(b"\x80\x01") == "1000000000000001"

    def test_empty(self):
        assert to_bits(b"") == ""

    def test_bits_to_bytes_inverse(self):
        data = bytes(range(256))
        assert bits_to_bytes(to_bits(data)) == data

    def test_bits_to_bytes_rejects_partial_byte(self):
        with pytest.raises(ValueError):
            bits_to_bytes("0101")


class TestPadder:
    """Tests for the Merkle-Damgard padding rule."""

    def test_num_zeros_abc(self):
        assert zero_padding_length(24) == 423

    def test_padded_abc_big_endian(self):
        expected = (
            "01100001" + "01100010" + "01100011"
            + "1"
            + "0" * 423
            + format(24, "064b")
        )
        assert pad_message(b"abc", "big") == expected

    def test_padded_one_little_endian(self):
        """Length 8 lands in the first byte of the field for MD5."""
        expected = (
            "00110001"
            + "1"
            + "0" * 439
            + "00001000" + "0" * 56
        )
        assert pad_message(b"1", "little") == expected

    def test_length_field_byte_orders(self):
        big = encode_length(0x0102030405060708, "big")
        little = encode_length(0x0102030405060708, "little")
        assert bits_to_bytes(big) == bytes([1, 2, 3, 4, 5, 6, 7, 8])
        assert bits_to_bytes(little) == bytes([8, 7, 6, 5, 4, 3, 2, 1])

    def test_length_field_wraps_at_2_64(self):
        assert encode_length(2 ** 64 + 5, "big") == encode_length(5, "big")

    def test_unknown_byteorder(self):
        with pytest.raises(ValueError):
            encode_length(8, "middle")

    @pytest.mark.parametrize("byteorder", ["big", "little"])
    def test_padding_invariant_all_bit_lengths(self, byteorder):
        """Every bit length pads to a block multiple and decodes back."""
        for bit_length in range(0, 1100):
            padded = pad_bits("1" * bit_length, byteorder)
            assert len(padded) % BLOCK_BITS == 0
            assert decode_length(padded, byteorder) == bit_length
            assert padded[bit_length] == "1"

    @pytest.mark.parametrize("byteorder", ["big", "little"])
    def test_padding_is_minimal(self, byteorder):
        """Padding never adds a whole spare block."""
        for bit_length in range(0, 1100, 7):
            padded = pad_bits("0" * bit_length, byteorder)
            assert len(padded) - bit_length <= BLOCK_BITS + 64


class TestBlockSplitter:
    """Tests for block and word extraction."""

    @pytest.mark.parametrize("byte_length,blocks", [
        (0, 1), (55, 1), (56, 2), (63, 2), (64, 2), (119, 2), (120, 3), (128, 3),
    ])
    def test_block_count_boundaries(self, byte_length, blocks):
        """56 bytes leaves no room for the '1' bit and length, forcing a new block."""
        padded = pad_message(b"\xaa" * byte_length, "big")
        assert len(split_blocks(padded)) == blocks
        assert block_count(byte_length) == blocks

    def test_padding_only_block(self):
        """At 64 bytes the second block carries nothing but padding."""
        padded = pad_message(b"\xff" * 64, "big")
        last = split_blocks(padded)[-1]
        assert last == "1" + "0" * 447 + format(512, "064b")

    def test_split_rejects_ragged_input(self):
        with pytest.raises(InvariantError):
            split_blocks("0" * 500)

    def test_md5_words_of_one(self):
        """Word 0 holds 0x31, 0x80 little-endian; word 14 the bit length."""
        block = split_blocks(pad_message(b"1", "little"))[0]
        words = block_words(block, "little")
        assert len(words) == 16
        assert words[0] == 32817
        assert words[14] == 8

    def test_md5_words_of_the(self):
        block = split_blocks(pad_message(b"The", "little"))[0]
        words = block_words(block, "little")
        assert words[0] == 2154129492
        assert words[14] == 24

    def test_big_endian_words(self):
        block = split_blocks(pad_message(b"abc", "big"))[0]
        words = block_words(block, "big")
        assert words[0] == 0x61626380
        assert words[15] == 24

    def test_block_words_rejects_wrong_size(self):
        with pytest.raises(InvariantError):
            block_words("0" * 256, "big")
