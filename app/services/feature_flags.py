from collections.abc import Mapping

FEATURE_PREFIX = "features."


class FeatureFlagService:
    """Boolean feature flags backed by ``features.<name>`` properties.

    An absent property resolves to ``False``.
    """

    def __init__(self, features: Mapping[str, bool]) -> None:
        self._properties = {
            f"{FEATURE_PREFIX}{name}": bool(value) for name, value in features.items()
        }

    def is_enabled(self, name: str) -> bool:
        return self._properties.get(f"{FEATURE_PREFIX}{name}", False)
