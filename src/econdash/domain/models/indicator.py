"""Indicator catalog domain models."""

from enum import Enum

from pydantic import Field

from econdash.domain.models.base import ValueObject


class Frequency(str, Enum):
    DAILY = "Daily"
    WEEKLY = "Weekly"
    MONTHLY = "Monthly"
    QUARTERLY = "Quarterly"


class CalculationType(str, Enum):
    """Transformation applied to raw values before display."""

    NONE = "NONE"
    YOY_PERCENT = "YOY_PERCENT"
    MOM_PERCENT = "MOM_PERCENT"
    QOQ_PERCENT = "QOQ_PERCENT"
    MOM_CHANGE = "MOM_CHANGE"


class ChartShape(str, Enum):
    LINE = "line"
    BAR = "bar"
    AREA = "area"


class ApiSource(str, Enum):
    FRED = "FRED"
    MOCK = "Mock"


class IndicatorCategory(str, Enum):
    """Dashboard sections; the value is the URL slug."""

    ECONOMIC_OUTPUT = "economic-output"
    LABOR_MARKET = "labor-market"
    INFLATION_PRICES = "inflation-prices"
    CONSUMER_ACTIVITY = "consumer-activity"
    BUSINESS_ACTIVITY = "business-activity"
    HOUSING_MARKET = "housing-market"
    INTERNATIONAL_TRADE = "international-trade"
    FINANCIAL_CONDITIONS = "financial-conditions"


CATEGORY_NAMES: dict[IndicatorCategory, str] = {
    IndicatorCategory.ECONOMIC_OUTPUT: "Economic Output & Growth",
    IndicatorCategory.LABOR_MARKET: "Labor Market",
    IndicatorCategory.INFLATION_PRICES: "Inflation & Prices",
    IndicatorCategory.CONSUMER_ACTIVITY: "Consumer Activity",
    IndicatorCategory.BUSINESS_ACTIVITY: "Business Activity & Investment",
    IndicatorCategory.HOUSING_MARKET: "Housing Market",
    IndicatorCategory.INTERNATIONAL_TRADE: "International Trade",
    IndicatorCategory.FINANCIAL_CONDITIONS: "Financial Conditions & Markets",
}


class IndicatorDescriptor(ValueObject):
    """Immutable catalog entry describing one indicator."""

    id: str = Field(..., description="Unique indicator key")
    name: str = Field(..., description="Display name")
    unit: str = Field(..., description="Measurement unit, e.g. '%', 'Index'")
    frequency: Frequency = Field(..., description="Observation frequency; drives lookbacks")
    calculation: CalculationType = Field(default=CalculationType.NONE)
    chart_shape: ChartShape = Field(default=ChartShape.LINE, description="Presentation hint")
    category: IndicatorCategory | None = None
    description: str = ""
    source_name: str = ""
    source_link: str | None = None
    api_source: ApiSource = ApiSource.FRED
    api_identifier: str | None = Field(
        default=None, description="Upstream series id; defaults to the indicator id"
    )
    notes: str | None = None

    @property
    def series_identifier(self) -> str:
        return self.api_identifier or self.id
