from talent_directory.services.directory.ranking import completeness_score, rank_by_completeness

from conftest import make_profile


def _full(**overrides):
    fields = dict(
        name="Full",
        job_title="CFO",
        company_name="Acme",
        nationality="Cypriot",
        short_bio="Short",
        long_bio="Long",
        profile_picture="https://img/1.jpg",
        areas_of_expertise=["Tax"],
        languages=["English"],
        keywords=["keynote"],
        memberships=["ICC"],
    )
    fields.update(overrides)
    return make_profile(**fields)


def test_full_profile_scores_every_tracked_field():
    assert completeness_score(_full()) == 11


def test_blank_strings_and_empty_arrays_are_not_populated():
    record = make_profile(name="   ", job_title="", short_bio=None, languages=[], keywords=[])
    assert completeness_score(record) == 0


def test_untracked_fields_do_not_count():
    record = make_profile(
        name="Only Name",
        email="x@example.com",
        interested_in=["speaker", "panelist"],
        social_media_links={"linkedin": "https://linkedin.com/in/x"},
    )
    assert completeness_score(record) == 1


def test_score_tolerates_raw_dicts():
    assert completeness_score({"name": "A", "languages": None, "keywords": "kw", "profile_picture": 0}) == 3


def test_more_complete_profile_sorts_first_regardless_of_input_order():
    eight = _full(name="Eight", nationality=None, long_bio="", keywords=[])
    three = make_profile(name="Three", job_title="CEO", languages=["Greek"])
    assert completeness_score(eight) == 8
    assert completeness_score(three) == 3
    assert [r.name for r in rank_by_completeness([three, eight])] == ["Eight", "Three"]
    assert [r.name for r in rank_by_completeness([eight, three])] == ["Eight", "Three"]


def test_equal_scores_keep_input_order():
    a = make_profile(name="A", job_title="x")
    b = make_profile(name="B", company_name="y")
    c = make_profile(name="C", short_bio="z")
    top = _full(name="Top")
    ranked = rank_by_completeness([a, b, top, c])
    assert [r.name for r in ranked] == ["Top", "A", "B", "C"]
    ranked = rank_by_completeness([c, b, a])
    assert [r.name for r in ranked] == ["C", "B", "A"]


def test_ranking_returns_new_list():
    records = [make_profile(name="A"), _full()]
    ranked = rank_by_completeness(records)
    assert ranked is not records
    assert [r.name for r in records] == ["A", "Full"]
