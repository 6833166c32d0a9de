import json

import pytest

from twexport.models import StringRecord, UsageSite


SAMPLE_STRINGS = {
    "Hello %s, you have %d items": {
        "uses": [
            {"file": "src/applications/people/PeopleController.php", "line": 12},
            {"file": "src/view/page/PageView.php", "line": 88},
        ],
    },
    "100%% done": {
        "uses": [{"file": "src/progress/ProgressBar.php", "line": 3}],
    },
    "Cost: $5": {
        "uses": [{"file": "src/billing/Invoice.php", "line": 40}],
    },
    "Value: %f": {
        "uses": [{"file": "src/chart/Axis.php", "line": 7}],
    },
    "Orphaned string": {
        "uses": [],
    },
}


@pytest.fixture
def sample_records():
    return {
        string: StringRecord(
            string=string,
            uses=[UsageSite(file=u["file"], line=u["line"]) for u in spec["uses"]],
        )
        for string, spec in SAMPLE_STRINGS.items()
    }


@pytest.fixture
def library(tmp_path):
    """A library directory with an already extracted string cache."""
    root = tmp_path / "library"
    cache = root / ".cache"
    cache.mkdir(parents=True)
    (cache / "i18n_strings.json").write_text(
        json.dumps(SAMPLE_STRINGS), encoding="utf-8"
    )
    return root
