"""Domain exceptions."""


class EconDashError(Exception):
    """Base class for errors raised to callers of econdash."""


class IndicatorNotFoundError(EconDashError):
    def __init__(self, indicator_id: str) -> None:
        super().__init__(f"Unknown indicator: {indicator_id}")
        self.indicator_id = indicator_id


class FeatureAccessDeniedError(EconDashError):
    def __init__(self, feature: str, tier: str | None) -> None:
        super().__init__(f"Tier '{tier or 'free'}' cannot use {feature}")
        self.feature = feature
        self.tier = tier
