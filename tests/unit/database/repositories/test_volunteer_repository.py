#!/usr/bin/env python3
"""
Repository tests against an in-memory SQLite database.
"""

import pytest

from database.models import Match
from database.repository import VolunteerRepository
from tests.fixtures.volunteer_fixtures import (
    make_profile, make_category, make_skill, make_opportunity,
    make_opportunity_skill, make_volunteer_skill,
)

pytestmark = pytest.mark.db


@pytest.fixture
def repo(db_session):
    return VolunteerRepository(db_session)


@pytest.fixture
def seeded(db_session):
    category = make_category("Environmental Conservation")
    gardening, carpentry = make_skill("Gardening"), make_skill("Carpentry")
    profile = make_profile(location="Denver, CO")
    active = make_opportunity(title="Trail Repair", category=category)
    inactive = make_opportunity(title="Closed Listing", active=False)

    db_session.add_all([category, gardening, carpentry, profile, active, inactive])
    db_session.flush()
    db_session.add_all([
        make_volunteer_skill(profile, gardening),
        make_opportunity_skill(active, gardening, required=True),
        make_opportunity_skill(active, carpentry),
    ])
    db_session.commit()

    return {
        'category': category,
        'gardening': gardening,
        'carpentry': carpentry,
        'profile': profile,
        'active': active,
        'inactive': inactive,
    }


def _match_row(profile, opportunity, score, reasons):
    return {
        'profile_id': profile.id,
        'opportunity_id': opportunity.id,
        'match_score': score,
        'match_reasons': reasons,
    }


class TestReads:

    def test_list_active_opportunities_excludes_inactive(self, repo, seeded):
        ids = [o.id for o in repo.list_active_opportunities()]
        assert ids == [seeded['active'].id]

    def test_list_skill_ids_for_profile(self, repo, seeded):
        assert repo.list_skill_ids_for_profile(seeded['profile'].id) == [seeded['gardening'].id]

    def test_list_categories(self, repo, seeded):
        assert [c.name for c in repo.list_categories()] == ["Environmental Conservation"]

    def test_list_opportunity_skills(self, repo, seeded):
        rows = repo.list_opportunity_skills(seeded['active'].id)
        assert {(r.skill_id, r.required) for r in rows} == {
            (seeded['gardening'].id, True),
            (seeded['carpentry'].id, False),
        }

    def test_list_opportunity_skills_for_batch(self, repo, seeded):
        result = repo.list_opportunity_skills_for([seeded['active'].id, seeded['inactive'].id])
        assert len(result[seeded['active'].id]) == 2
        assert result[seeded['inactive'].id] == []
        assert repo.list_opportunity_skills_for([]) == {}


class TestProfileWrites:

    def test_replace_volunteer_skills(self, repo, seeded):
        profile = seeded['profile']
        count = repo.replace_volunteer_skills(profile.id, [seeded['carpentry'].id, seeded['carpentry'].id])
        repo.commit()

        assert count == 1
        assert repo.list_skill_ids_for_profile(profile.id) == [seeded['carpentry'].id]

    def test_update_profile(self, repo, seeded):
        profile = repo.get_profile(seeded['profile'].id)
        repo.update_profile(profile, location="Boulder, CO", interests=["Gardening"])
        repo.commit()

        reloaded = repo.get_profile(profile.id)
        assert reloaded.location == "Boulder, CO"
        assert reloaded.interests == ["Gardening"]

    def test_update_profile_rejects_unknown_field(self, repo, seeded):
        with pytest.raises(ValueError):
            repo.update_profile(seeded['profile'], email="new@example.org")


class TestUpsertMatches:

    def test_insert_then_overwrite_on_conflict(self, repo, seeded, db_session):
        profile, opportunity = seeded['profile'], seeded['active']

        assert repo.upsert_matches([_match_row(profile, opportunity, 65, ["Matches your interests"])]) == 1
        repo.commit()
        repo.upsert_matches([_match_row(profile, opportunity, 80, ["1 matching skill", "Matches your interests"])])
        repo.commit()

        rows = db_session.query(Match).all()
        assert len(rows) == 1
        assert rows[0].match_score == 80
        assert rows[0].match_reasons == ["1 matching skill", "Matches your interests"]

    def test_conflict_keeps_viewed_and_dismissed(self, repo, seeded, db_session):
        profile, opportunity = seeded['profile'], seeded['active']
        repo.upsert_matches([_match_row(profile, opportunity, 65, ["Matches your interests"])])
        repo.commit()

        match = repo.get_existing_match(profile.id, opportunity.id)
        repo.mark_viewed(match)
        repo.set_dismissed(match, True)
        repo.commit()

        repo.upsert_matches([_match_row(profile, opportunity, 70, ["Matches your interests", "In your area"])])
        repo.commit()
        db_session.expire_all()

        match = repo.get_existing_match(profile.id, opportunity.id)
        assert match.match_score == 70
        assert match.viewed is True
        assert match.dismissed is True

    def test_empty_rows_is_a_no_op(self, repo, db_session):
        assert repo.upsert_matches([]) == 0
        assert db_session.query(Match).count() == 0


class TestMatchReads:

    def test_list_matches_for_profile_ordering_and_dismissed(self, repo, seeded, db_session):
        profile = seeded['profile']
        other = make_opportunity(title="Beach Cleanup")
        db_session.add(other)
        db_session.commit()

        repo.upsert_matches([
            _match_row(profile, seeded['active'], 55, ["In your area"]),
            _match_row(profile, other, 90, ["Remote opportunity"]),
        ])
        repo.commit()

        assert [m.match_score for m in repo.list_matches_for_profile(profile.id)] == [90, 55]

        top = repo.get_existing_match(profile.id, other.id)
        repo.set_dismissed(top)
        repo.commit()

        assert [m.match_score for m in repo.list_matches_for_profile(profile.id)] == [55]
        assert len(repo.list_matches_for_profile(profile.id, include_dismissed=True)) == 2
        assert [m.match_score for m in repo.list_matches_for_profile(profile.id, min_score=60, include_dismissed=True)] == [90]

    def test_get_match_missing(self, repo):
        import uuid
        assert repo.get_match(uuid.uuid4()) is None
