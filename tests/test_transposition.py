import pytest

from cipherbox.transposition import Columnar, RailFence

COLUMNAR_CASES = [
    ("defend the east wall of the castle", "german", "n wfc etslhtd altsee o edea a fht el"),
    (
        "the quick brown fox jumps over the lazy dog",
        "cipher",
        "tioxs agqbfme d    uve  hcw  tz eknjohy uroprlo ",
    ),
    ("we are discovered save yourself", "head", "  crs rfadoeays eese eulwrivdvoe"),
    ("xqzmtplkjhgfdsayuirewnbvc", "tail", "qphsin zlgarb mkfyev xtjduwc"),
]

RAIL_CASES = [
    ("defend the east wall of the castle", 3, "dnhaw tcleedtees alo h atef  tlfes"),
    ("meet me at 5pm behind the shed", 5, "maeee tbhh ee  itstm5mn hd pde"),
    (
        "the quick brown fox jumps over the lazy dog",
        4,
        "tioxs aghucrwo p rtlzoeqkbnfjmoeh yd   uve ",
    ),
]


@pytest.mark.parametrize("plaintext, key, expected", COLUMNAR_CASES)
def test_columnar_encrypt(plaintext, key, expected):
    assert Columnar(key).encrypt(plaintext) == expected


@pytest.mark.parametrize("expected, key, ciphertext", COLUMNAR_CASES)
def test_columnar_decrypt(expected, key, ciphertext):
    assert Columnar(key).decrypt(ciphertext) == expected


def test_columnar_small_values():
    assert Columnar("ba").encrypt("abcd") == "bdac"
    assert Columnar("ba").decrypt("bdac") == "abcd"


def test_columnar_key_duplicates_removed():
    assert Columnar("bba").key == "ba"
    assert Columnar("bba").encrypt("abcd") == "bdac"


def test_columnar_pads_with_spaces():
    assert Columnar("ab").encrypt("abc") == "acb "
    assert Columnar("ab").decrypt("acb ") == "abc"


def test_columnar_decrypt_ignores_incomplete_row():
    assert Columnar("ba").decrypt("bdacx") == "abcd"


def test_columnar_empty_key_raises():
    with pytest.raises(ValueError):
        Columnar("").encrypt("abc")
    with pytest.raises(ValueError):
        Columnar("").decrypt("abc")


@pytest.mark.parametrize("key", ["zebra", "k", "qwerty", "lemon"])
def test_columnar_round_trip(key):
    text = "attack at dawn tomorrow"
    assert Columnar(key).decrypt(Columnar(key).encrypt(text)) == text


@pytest.mark.parametrize("plaintext, rails, expected", RAIL_CASES)
def test_rail_fence_encrypt(plaintext, rails, expected):
    assert RailFence(rails).encrypt(plaintext) == expected


@pytest.mark.parametrize("expected, rails, ciphertext", RAIL_CASES)
def test_rail_fence_decrypt(expected, rails, ciphertext):
    assert RailFence(rails).decrypt(ciphertext) == expected


def test_rail_fence_two_rails():
    assert RailFence(2).encrypt("abcdef") == "acebdf"
    assert RailFence(2).decrypt("acebdf") == "abcdef"


@pytest.mark.parametrize("rails", [1, 0, -3])
def test_rail_fence_single_rail_passthrough(rails):
    assert RailFence(rails).encrypt("hello world") == "hello world"
    assert RailFence(rails).decrypt("hello world") == "hello world"


def test_rail_fence_empty_text():
    assert RailFence(3).encrypt("") == ""
    assert RailFence(3).decrypt("") == ""


@pytest.mark.parametrize("rails", [2, 3, 4, 7, 30])
def test_rail_fence_round_trip(rails):
    text = "we are discovered flee at once"
    encrypted = RailFence(rails).encrypt(text)
    assert sorted(encrypted) == sorted(text)
    assert RailFence(rails).decrypt(encrypted) == text