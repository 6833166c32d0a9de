import pytest

from twexport.errors import MissingInputError
from twexport.extraction.strings_reader import StringsCacheReader
from twexport.models import UsageSite


def test_read_preserves_file_order(library):
    records = StringsCacheReader().read(str(library / ".cache" / "i18n_strings.json"))
    assert list(records) == [
        "Hello %s, you have %d items",
        "100%% done",
        "Cost: $5",
        "Value: %f",
        "Orphaned string",
    ]
    assert records["Hello %s, you have %d items"].uses == [
        UsageSite(file="src/applications/people/PeopleController.php", line=12),
        UsageSite(file="src/view/page/PageView.php", line=88),
    ]
    assert records["Orphaned string"].use_count == 0


def test_missing_file_raises(tmp_path):
    path = tmp_path / "nope.json"
    with pytest.raises(MissingInputError, match="no such file exists"):
        StringsCacheReader().read(str(path))


def test_extra_keys_and_missing_uses_are_tolerated():
    records = StringsCacheReader().read_string(
        '{"A": {"types": {"x": 1}}, "B": {"uses": [{"file": "b.php", "line": "9"}]}}'
    )
    assert records["A"].uses == []
    assert records["B"].uses == [UsageSite(file="b.php", line=9)]


@pytest.mark.parametrize("content", ["not json", "[1, 2, 3]"])
def test_malformed_content_raises(content):
    with pytest.raises(MissingInputError):
        StringsCacheReader().read_string(content)


@pytest.mark.parametrize("content", [
    '{"Hello": "not-an-object"}',
    '{"Hello": {"uses": [{"file": "a.php"}]}}',
    '{"Hello": {"uses": [{"line": 3}]}}',
    '{"Hello": {"uses": ["a.php:3"]}}',
    '{"Hello": {"uses": [{"file": "a.php", "line": "three"}]}}',
    '{"Hello": {"uses": 7}}',
])
def test_malformed_record_raises(content):
    with pytest.raises(MissingInputError, match="Malformed string record 'Hello'"):
        StringsCacheReader().read_string(content, source="cache.json")
