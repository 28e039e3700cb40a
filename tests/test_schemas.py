import pytest
from pydantic import ValidationError

from hn_search.schemas import Hit, PageResult


def test_hit_accepts_numeric_object_id() -> None:
    hit = Hit.model_validate({"objectID": 42, "title": "Show HN"})
    assert hit.object_id == "42"


def test_hit_rejects_null_object_id() -> None:
    with pytest.raises(ValidationError):
        Hit.model_validate({"objectID": None, "title": "Ask HN"})


def test_page_result_ignores_extra_envelope_fields() -> None:
    result = PageResult.model_validate(
        {"hits": [{"objectID": "1", "_tags": ["story"]}], "page": 3, "nbPages": 9, "query": "x"}
    )
    assert result.page == 3
    assert result.nb_pages == 9
    assert result.hits[0].object_id == "1"
