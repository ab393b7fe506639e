"""Tests for payload decoding."""

import pytest

from reaction_ranker.types import (
    Issue,
    PayloadShapeError,
    Reaction,
    decode_issues,
    decode_reactions,
)


class TestIssueDecoding:
    def test_plain_issue(self):
        issue = Issue.from_payload({"number": 7, "title": "Crash on save"})
        assert issue == Issue(number=7, title="Crash on save", is_pull_request=False)

    def test_pull_request_marker(self):
        issue = Issue.from_payload({"number": 8, "title": "Fix", "pull_request": {"url": "x"}})
        assert issue.is_pull_request is True

    def test_empty_pull_request_object_still_counts(self):
        issue = Issue.from_payload({"number": 9, "title": "Fix", "pull_request": {}})
        assert issue.is_pull_request is True

    def test_null_pull_request_is_not_a_pr(self):
        issue = Issue.from_payload({"number": 10, "title": "Bug", "pull_request": None})
        assert issue.is_pull_request is False

    def test_extra_fields_are_ignored(self):
        issue = Issue.from_payload({"number": 1, "title": "t", "state": "open", "labels": []})
        assert issue.number == 1

    @pytest.mark.parametrize(
        "item",
        [
            {"title": "no number"},
            {"number": "12", "title": "string number"},
            {"number": -1, "title": "negative"},
            {"number": True, "title": "bool"},
            {"number": 3},
            {"number": 3, "title": None},
            "not an object",
        ],
    )
    def test_rejects_bad_shapes(self, item):
        with pytest.raises(PayloadShapeError):
            Issue.from_payload(item)

    def test_decode_issues_requires_array(self):
        with pytest.raises(PayloadShapeError):
            decode_issues({"message": "Bad credentials"})

    def test_decode_issues_keeps_order(self):
        issues = decode_issues([{"number": 5, "title": "a"}, {"number": 2, "title": "b"}])
        assert [i.number for i in issues] == [5, 2]


class TestReactionDecoding:
    def test_reaction(self):
        assert Reaction.from_payload({"id": 1, "content": "heart"}) == Reaction("heart")

    def test_missing_content(self):
        with pytest.raises(PayloadShapeError):
            Reaction.from_payload({"id": 1})

    def test_decode_reactions_requires_array(self):
        with pytest.raises(PayloadShapeError):
            decode_reactions("oops")

    def test_empty_array(self):
        assert decode_reactions([]) == []
