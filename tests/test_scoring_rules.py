"""Tests for tier classification and the band/age bucketing rules."""

import pytest
from datetime import timedelta

from keybaseid.scoring import github, keybase, twitter
from keybaseid.scoring.bands import AgeBands, band_score, days_since
from keybaseid.scoring.tiers import IdentityTier, classify_total


# ── Tiers ──

@pytest.mark.parametrize("total,tier", [
    (0, IdentityTier.UNKNOWN),
    (25, IdentityTier.UNKNOWN),
    (26, IdentityTier.WEAK),
    (50, IdentityTier.WEAK),
    (51, IdentityTier.PASSABLE),
    (74, IdentityTier.PASSABLE),
    (75, IdentityTier.ACCURATE),
    (89, IdentityTier.ACCURATE),
    (90, IdentityTier.POSITIVE),
    (140, IdentityTier.POSITIVE),
])
def test_classify_total_boundaries(total, tier):
    assert classify_total(total) is tier


def test_tier_display_values():
    assert [str(t) for t in IdentityTier] == ["Unknown", "Weak", "Passable", "Accurate", "Positive"]


# ── Follower bands ──

@pytest.mark.parametrize("followers,expected", [
    (0, 0), (1, 0), (2, 1), (5, 1), (6, 2), (10, 2),
    (11, 3), (20, 3), (21, 4), (50, 4), (51, 5), (10_000, 5),
])
def test_keybase_follower_bands(followers, expected):
    assert band_score(followers, keybase.FOLLOWER_BOUNDS) == expected


@pytest.mark.parametrize("followers,expected", [
    (0, 0), (1, 0), (2, 1), (5, 1), (6, 2), (10, 2),
    (11, 3), (20, 3), (21, 4), (22, 4), (5000, 4),
])
def test_github_follower_bands_top_inclusive(followers, expected):
    assert band_score(followers, github.FOLLOWER_BOUNDS) == expected


@pytest.mark.parametrize("followers,expected", [
    (0, 0), (50, 0), (51, 1), (300, 1), (301, 2), (2000, 2), (2001, 3), (2002, 3),
])
def test_twitter_follower_bands_top_inclusive(followers, expected):
    assert band_score(followers, twitter.FOLLOWER_BOUNDS) == expected


# ── Age bands ──

@pytest.mark.parametrize("days,expected", [
    (0, 0), (29, 0), (30, 1), (90, 1), (91, 2), (180, 2), (181, 3),
    (364, 3), (365, 4), (729, 4), (730, 5), (1094, 5), (1095, 6), (4000, 6),
])
def test_keybase_account_age(days, expected):
    assert keybase.ACCOUNT_AGE_BANDS.score(days) == expected


@pytest.mark.parametrize("days,expected", [
    (0, 0), (30, 0), (31, 1), (90, 1), (91, 2), (364, 2),
    (365, 3), (729, 3), (730, 4), (1094, 4), (1095, 5),
])
def test_github_account_age(days, expected):
    assert github.ACCOUNT_AGE_BANDS.score(days) == expected


def test_proof_age_uses_same_bands_as_github():
    for days in (0, 31, 91, 364, 365, 730, 1095):
        assert keybase.PROOF_AGE_BANDS.score(days) == github.ACCOUNT_AGE_BANDS.score(days)


@pytest.mark.parametrize("days,expected", [
    (0, 0), (30, 0), (31, 1), (91, 2), (365, 2), (729, 2),
    (730, 3), (1459, 3), (1460, 4), (5000, 4),
])
def test_twitter_account_age(days, expected):
    assert twitter.ACCOUNT_AGE_BANDS.score(days) == expected


def test_year_threshold_routes_to_years_branch_only():
    bands = AgeBands(day_bounds=(31, 91), year_threshold_days=365, year_bounds=(2, 3))
    below, at = bands.score(364), bands.score(365)
    assert below == len(bands.day_bounds)
    assert at == len(bands.day_bounds) + 1


def test_fractional_average_age_below_threshold():
    # 364.5 days is still in the days branch
    assert keybase.PROOF_AGE_BANDS.score(364.5) == 2


def test_max_scores():
    assert keybase.ACCOUNT_AGE_BANDS.max_score == 6
    assert github.ACCOUNT_AGE_BANDS.max_score == 5
    assert twitter.ACCOUNT_AGE_BANDS.max_score == 4


def test_days_since_counts_whole_days(now):
    assert days_since(now - timedelta(days=3, hours=23), now) == 3
    assert days_since(now, now) == 0
