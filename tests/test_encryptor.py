import random

from countryguess.encryptor import Encryptor


def _make(seed=7):
    return Encryptor(random.Random(seed))


def test_has_five_keys_of_distinct_sizes_in_range():
    enc = _make()
    sizes = [len(k) for k in enc.keys]
    assert len(sizes) == 5
    assert len(set(sizes)) == 5
    assert all(2 <= s <= 8 for s in sizes)


def test_round_trip():
    enc = _make()
    data = b"The quick brown fox jumps over the lazy dog"
    assert enc.decrypt(enc.encrypt(data)) == data


def test_length_preserved_and_accepts_bytearray():
    enc = _make()
    data = bytearray(range(50))
    assert len(enc.encrypt(data)) == 50
    assert enc.decrypt(enc.encrypt(data)) == bytes(data)


def test_xor_is_linear():
    enc = _make(3)
    a = bytes(range(0, 40))
    b = bytes(range(100, 140))
    ea, eb = enc.encrypt(a), enc.encrypt(b)
    assert bytes(x ^ y for x, y in zip(ea, eb)) == bytes(x ^ y for x, y in zip(a, b))


def test_same_seed_same_output():
    data = b"hello world"
    first = _make(11).encrypt(data)
    second = _make(11).encrypt(data)
    assert first == second
    assert len(first) == len(data)
    assert _make(11).decrypt(first) == data


def test_regenerate_changes_every_key_size():
    enc = _make(5)
    before = [len(k) for k in enc.keys]
    enc.regenerate_keys()
    after = [len(k) for k in enc.keys]
    assert all(b != a for b, a in zip(before, after))
    assert len(set(after)) == 5


def test_str_lists_every_key():
    enc = _make()
    lines = str(enc).splitlines()
    assert len(lines) == 5
    assert lines[0].startswith("keys[0] = { ")
    assert lines[4].endswith(" }")
    first_values = lines[0][len("keys[0] = { "):-2].split(", ")
    assert [int(v) for v in first_values] == list(enc.keys[0])


def test_empty_data():
    assert _make().encrypt(b"") == b""