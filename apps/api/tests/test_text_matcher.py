from talent_directory.services.directory.text_matcher import filter_by_text, matches_text

from conftest import make_profile


def test_empty_term_passes_everything():
    records = [make_profile(name="A"), make_profile(name="B")]
    assert filter_by_text(records, "") == records
    assert filter_by_text(records, "   ") == records


def test_match_is_case_insensitive_across_text_fields():
    record = make_profile(short_bio="Loves Data Science")
    assert matches_text(record, "data science")
    assert matches_text(record, "DATA")
    assert not matches_text(record, "physics")


def test_each_text_field_is_searched():
    for field in ("name", "job_title", "company_name", "short_bio", "long_bio"):
        record = make_profile(**{"name": "Someone", field: "Shipping Finance"})
        assert matches_text(record, "shipping"), field


def test_array_elements_are_searched_individually():
    record = make_profile(keywords=["board effectiveness"], areas_of_expertise=["Fintech"], memberships=["ICC"])
    assert matches_text(record, "effective")
    assert matches_text(record, "fintech")
    assert matches_text(record, "icc")
    # substring must fall inside one element, not across joined elements
    assert not matches_text(make_profile(keywords=["board", "effectiveness"]), "board effectiveness")


def test_languages_and_nationality_are_not_searched():
    record = make_profile(name="X", languages=["Greek"], nationality="Cypriot")
    assert not matches_text(record, "greek")
    assert not matches_text(record, "cypriot")


def test_null_and_malformed_fields_never_raise():
    raw = {"name": None, "job_title": 42, "keywords": None, "areas_of_expertise": "not-a-list", "memberships": [None, 7]}
    assert matches_text(raw, "anything") is False
    assert matches_text({}, "x") is False


def test_filter_preserves_input_order():
    records = [make_profile(name=f"Data {i}") for i in range(5)]
    assert filter_by_text(records, "data") == records
