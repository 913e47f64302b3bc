from app.services.feature_flags import FeatureFlagService


def test_enabled_flag():
    flags = FeatureFlagService({"tour-ratings": True})
    assert flags.is_enabled("tour-ratings") is True


def test_disabled_flag():
    flags = FeatureFlagService({"tour-ratings": False})
    assert flags.is_enabled("tour-ratings") is False


def test_absent_flag_defaults_to_false():
    flags = FeatureFlagService({})
    assert flags.is_enabled("tour-ratings") is False
    assert flags.is_enabled("") is False


def test_flags_are_independent():
    flags = FeatureFlagService({"tour-ratings": True, "packages": False})
    assert flags.is_enabled("tour-ratings") is True
    assert flags.is_enabled("packages") is False
    assert flags.is_enabled("tour") is False


def test_repeated_lookups_are_stable():
    flags = FeatureFlagService({"tour-ratings": True})
    assert all(flags.is_enabled("tour-ratings") for _ in range(5))
