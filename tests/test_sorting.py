from hn_search.schemas import Hit, SortKey
from hn_search.services.sorting import apply_sort, sort_hits


def _hit(
    object_id: str,
    *,
    title: str | None = None,
    author: str | None = None,
    num_comments: int | None = None,
    points: int | None = None,
) -> Hit:
    return Hit(
        objectID=object_id,
        title=title,
        author=author,
        url=f"https://example.com/{object_id}",
        num_comments=num_comments,
        points=points,
    )


def _ids(hits: list[Hit]) -> list[str]:
    return [hit.object_id for hit in hits]


def test_points_sort_descending() -> None:
    hits = [_hit("a", points=3), _hit("b", points=5), _hit("c", points=1)]
    assert [hit.points for hit in sort_hits(SortKey.POINTS, hits)] == [5, 3, 1]


def test_none_sort_keeps_order_and_returns_new_list() -> None:
    hits = [_hit("b"), _hit("a"), _hit("c")]
    ordered = sort_hits(SortKey.NONE, hits)
    assert ordered == hits
    assert ordered is not hits


def test_title_and_author_sort_ascending() -> None:
    hits = [
        _hit("1", title="Redux", author="zed"),
        _hit("2", title="Angular", author="amy"),
        _hit("3", title="Mobx", author="mia"),
    ]
    assert _ids(sort_hits(SortKey.TITLE, hits)) == ["2", "3", "1"]
    assert _ids(sort_hits(SortKey.AUTHOR, hits)) == ["2", "3", "1"]


def test_title_sort_is_stable_for_ties() -> None:
    hits = [_hit("1", title="Same"), _hit("2", title="Same"), _hit("3", title="Alpha")]
    assert _ids(sort_hits(SortKey.TITLE, hits)) == ["3", "1", "2"]


def test_comments_ties_come_out_in_reverse_arrival_order() -> None:
    hits = [
        _hit("1", num_comments=4),
        _hit("2", num_comments=9),
        _hit("3", num_comments=4),
        _hit("4", num_comments=4),
    ]
    assert _ids(sort_hits(SortKey.COMMENTS, hits)) == ["2", "4", "3", "1"]


def test_missing_values_sort_last_ascending_and_first_descending() -> None:
    hits = [
        _hit("1", title=None, points=None),
        _hit("2", title="B", points=2),
        _hit("3", title="A", points=7),
    ]
    assert _ids(sort_hits(SortKey.TITLE, hits)) == ["3", "2", "1"]
    assert _ids(sort_hits(SortKey.POINTS, hits)) == ["1", "3", "2"]


def test_sort_does_not_mutate_input() -> None:
    hits = [_hit("1", points=1), _hit("2", points=2)]
    sort_hits(SortKey.POINTS, hits)
    apply_sort(SortKey.NONE, hits, reverse=True)
    assert _ids(hits) == ["1", "2"]


def test_reverse_toggle_is_exact_reverse_of_sorted_order() -> None:
    hits = [
        _hit("1", title="B"),
        _hit("2", title="A"),
        _hit("3", title="B"),
        _hit("4", title="C"),
    ]
    forward = apply_sort(SortKey.TITLE, hits)
    backward = apply_sort(SortKey.TITLE, hits, reverse=True)
    assert _ids(forward) == ["2", "1", "3", "4"]
    assert _ids(backward) == list(reversed(_ids(forward)))


def test_reversed_points_restores_original_tie_order() -> None:
    hits = [_hit("1", points=5), _hit("2", points=1), _hit("3", points=5)]
    assert _ids(apply_sort(SortKey.POINTS, hits)) == ["3", "1", "2"]
    assert _ids(apply_sort(SortKey.POINTS, hits, reverse=True)) == ["2", "1", "3"]


def test_sort_accepts_plain_string_key() -> None:
    hits = [_hit("1", points=1), _hit("2", points=2)]
    assert _ids(sort_hits("POINTS", hits)) == ["2", "1"]
