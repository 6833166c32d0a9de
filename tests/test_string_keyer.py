from twexport.formatting.string_keyer import KEY_LENGTH, string_key


def test_key_is_sha1_prefix():
    assert string_key("abc") == "a9993e364706816a"
    assert string_key("") == "da39a3ee5e6b4b0d"


def test_key_shape():
    key = string_key("Hello %s, you have %d items")
    assert len(key) == KEY_LENGTH == 16
    assert key == key.lower()
    int(key, 16)


def test_key_is_deterministic():
    assert string_key("Used in:") == string_key("Used in:")


def test_distinct_strings_have_distinct_keys():
    strings = [
        "Hello %s, you have %d items",
        "Hello %s, you have %d item",
        "100%% done",
        "100% done",
        "Cost: $5",
        "Value: %f",
        "",
        " ",
        "Größe",
    ]
    keys = {string_key(s) for s in strings}
    assert len(keys) == len(strings)
