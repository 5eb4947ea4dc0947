from collections import Counter

import pytest

from algocraft.huffman import (
    HuffmanNode,
    build_codes,
    build_huffman_tree,
    decode,
    encode,
)

TEXTS = [
    "abracadabra",
    "this is an example of a huffman tree",
    "aaaaabbbbcccdde",
    "ab",
    "the quick brown fox jumps over the lazy dog",
]


@pytest.mark.parametrize("text", TEXTS)
def test_round_trip(text):
    root = build_huffman_tree(text)
    codes = build_codes(root)
    assert decode(encode(text, codes), root) == text


@pytest.mark.parametrize("text", TEXTS)
def test_root_frequency_is_length(text):
    assert build_huffman_tree(text).freq == len(text)


@pytest.mark.parametrize("text", TEXTS)
def test_codes_are_prefix_free(text):
    codes = list(build_codes(build_huffman_tree(text)).values())
    for a in codes:
        for b in codes:
            if a is not b:
                assert not b.startswith(a)


@pytest.mark.parametrize("text", TEXTS)
def test_kraft_sum_is_one(text):
    codes = build_codes(build_huffman_tree(text))
    assert sum(2.0 ** -len(code) for code in codes.values()) == pytest.approx(1.0)


@pytest.mark.parametrize("text", TEXTS)
def test_frequent_characters_get_shorter_codes(text):
    counts = Counter(text)
    codes = build_codes(build_huffman_tree(text))
    for a in counts:
        for b in counts:
            if counts[a] > counts[b]:
                assert len(codes[a]) <= len(codes[b])


def test_every_character_has_a_code():
    text = "mississippi"
    assert set(build_codes(build_huffman_tree(text))) == set(text)


def test_single_symbol_has_empty_code():
    root = build_huffman_tree("aaaa")
    assert root.is_leaf
    assert build_codes(root) == {"a": ""}


def test_empty_data_rejected():
    with pytest.raises(ValueError):
        build_huffman_tree("")


def test_encode_unknown_character():
    codes = build_codes(build_huffman_tree("abc"))
    with pytest.raises(ValueError):
        encode("abz", codes)


def test_decode_rejects_bits_on_leaf_root():
    with pytest.raises(ValueError):
        decode("0", HuffmanNode(3, "a"))


def test_encoded_length_matches_weighted_code_length():
    text = "aaaaabbbbcccdde"
    codes = build_codes(build_huffman_tree(text))
    expected = sum(count * len(codes[c]) for c, count in Counter(text).items())
    assert len(encode(text, codes)) == expected