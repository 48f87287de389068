"""Static indicator catalog.

Built once at startup and injected into the orchestrator and use cases; it is
never mutated at runtime.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from econdash.domain.exceptions import IndicatorNotFoundError
from econdash.domain.models.indicator import (
    ApiSource,
    CalculationType,
    ChartShape,
    Frequency,
    IndicatorCategory,
    IndicatorDescriptor,
)

_C = IndicatorCategory
_F = Frequency
_K = CalculationType


def _fred(
    id: str,
    name: str,
    category: IndicatorCategory,
    unit: str,
    frequency: Frequency,
    series_id: str,
    *,
    calculation: CalculationType = CalculationType.NONE,
    chart: ChartShape = ChartShape.LINE,
    source: str,
    description: str = "",
    notes: str | None = None,
) -> IndicatorDescriptor:
    return IndicatorDescriptor(
        id=id,
        name=name,
        category=category,
        unit=unit,
        frequency=frequency,
        calculation=calculation,
        chart_shape=chart,
        description=description,
        source_name=f"{source} via FRED",
        source_link=f"https://fred.stlouisfed.org/series/{series_id}",
        api_source=ApiSource.FRED,
        api_identifier=series_id,
        notes=notes,
    )


DEFAULT_INDICATORS: tuple[IndicatorDescriptor, ...] = (
    # Economic Output & Growth
    _fred("GDP_REAL", "Real Gross Domestic Product", _C.ECONOMIC_OUTPUT,
          "Billions of Chained 2017 Dollars", _F.QUARTERLY, "GDPC1", source="BEA",
          description="Value of final goods/services, inflation-adjusted."),
    _fred("GDP_GROWTH", "Real GDP Growth Rate", _C.ECONOMIC_OUTPUT,
          "% Change (Annualized)", _F.QUARTERLY, "A191RL1Q225SBEA", chart=ChartShape.BAR,
          source="BEA", description="% change in real GDP, annualized."),
    _fred("GDPDEF_YOY_PCT", "GDP Deflator (YoY %)", _C.INFLATION_PRICES, "% Change YoY",
          _F.QUARTERLY, "GDPDEF", calculation=_K.YOY_PERCENT, chart=ChartShape.BAR,
          source="BEA"),
    # Labor Market
    _fred("UNRATE", "Unemployment Rate", _C.LABOR_MARKET, "%", _F.MONTHLY, "UNRATE",
          source="BLS", description="% of labor force unemployed but seeking work."),
    _fred("U6RATE", "Underemployment Rate (U-6)", _C.LABOR_MARKET, "%", _F.MONTHLY,
          "U6RATE", source="BLS"),
    _fred("PAYEMS_MOM_CHG", "Non-Farm Payrolls (MoM Change)", _C.LABOR_MARKET,
          "Thousands of Persons", _F.MONTHLY, "PAYEMS", calculation=_K.MOM_CHANGE,
          chart=ChartShape.BAR, source="BLS", notes="Calculated from PAYEMS series."),
    _fred("AVGHRLY_YOY_PCT", "Average Hourly Earnings (YoY %)", _C.LABOR_MARKET,
          "% Change YoY", _F.MONTHLY, "CES0500000003", calculation=_K.YOY_PERCENT,
          chart=ChartShape.BAR, source="BLS"),
    _fred("JOBLESSCLAIMS", "Initial Jobless Claims", _C.LABOR_MARKET, "Number", _F.WEEKLY,
          "ICSA", source="DOL"),
    _fred("ECI", "Employment Cost Index (YoY %)", _C.LABOR_MARKET, "% Change YoY",
          _F.QUARTERLY, "ECIALLCIV", calculation=_K.YOY_PERCENT, chart=ChartShape.BAR,
          source="BLS", notes="Calculated from index level."),
    # Inflation & Prices
    _fred("CPI_YOY_PCT", "Consumer Price Index (CPI-U, YoY %)", _C.INFLATION_PRICES,
          "% Change YoY", _F.MONTHLY, "CPIAUCSL", calculation=_K.YOY_PERCENT,
          chart=ChartShape.BAR, source="BLS"),
    _fred("CORE_CPI_YOY_PCT", "Core CPI (YoY %)", _C.INFLATION_PRICES, "% Change YoY",
          _F.MONTHLY, "CPILFESL", calculation=_K.YOY_PERCENT, chart=ChartShape.BAR,
          source="BLS"),
    _fred("PCE_YOY_PCT", "PCE Price Index (YoY %)", _C.INFLATION_PRICES, "% Change YoY",
          _F.MONTHLY, "PCEPI", calculation=_K.YOY_PERCENT, chart=ChartShape.BAR,
          source="BEA"),
    _fred("CORE_PCE_YOY_PCT", "Core PCE Price Index (YoY %)", _C.INFLATION_PRICES,
          "% Change YoY", _F.MONTHLY, "PCEPILFE", calculation=_K.YOY_PERCENT,
          chart=ChartShape.BAR, source="BEA", notes="The Fed's preferred inflation gauge."),
    _fred("OIL_WTI", "Crude Oil Price (WTI)", _C.INFLATION_PRICES, "USD per Barrel",
          _F.DAILY, "DCOILWTICO", source="EIA"),
    # Consumer Activity
    _fred("RETAIL_SALES_MOM_PCT", "Retail Sales (Advance, MoM %)", _C.CONSUMER_ACTIVITY,
          "% Change MoM", _F.MONTHLY, "RSAFS", calculation=_K.MOM_PERCENT,
          chart=ChartShape.BAR, source="Census"),
    _fred("PERS_INC_MOM_PCT", "Personal Income (MoM %)", _C.CONSUMER_ACTIVITY,
          "% Change MoM", _F.MONTHLY, "PI", calculation=_K.MOM_PERCENT,
          chart=ChartShape.BAR, source="BEA"),
    _fred("UMCSENT", "Consumer Sentiment Index (UMich)", _C.CONSUMER_ACTIVITY,
          "Index Q1 1966=100", _F.MONTHLY, "UMCSENT", source="UMich"),
    _fred("SAVINGS_RATE", "Personal Savings Rate", _C.CONSUMER_ACTIVITY, "%", _F.MONTHLY,
          "PSAVERT", source="BEA"),
    # Business Activity & Investment
    _fred("INDPRO", "Industrial Production Index", _C.BUSINESS_ACTIVITY, "Index 2017=100",
          _F.MONTHLY, "INDPRO", chart=ChartShape.AREA, source="FRB"),
    _fred("CAPUTIL", "Capacity Utilization", _C.BUSINESS_ACTIVITY, "% of Capacity",
          _F.MONTHLY, "TCU", source="FRB"),
    _fred("CORP_PROFITS_QOQ_PCT", "Corporate Profits After Tax (QoQ %)",
          _C.BUSINESS_ACTIVITY, "% Change QoQ", _F.QUARTERLY, "CP",
          calculation=_K.QOQ_PERCENT, chart=ChartShape.BAR, source="BEA"),
    _fred("DUR_GOODS_MOM_PCT", "Durable Goods Orders (MoM %)", _C.BUSINESS_ACTIVITY,
          "% Change MoM", _F.MONTHLY, "DGORDER", calculation=_K.MOM_PERCENT,
          chart=ChartShape.BAR, source="Census"),
    # Housing Market
    _fred("CASE_SHILLER_YOY_PCT", "S&P Case-Shiller Home Price Index (YoY %)",
          _C.HOUSING_MARKET, "% Change YoY", _F.MONTHLY, "CSUSHPINSA",
          calculation=_K.YOY_PERCENT, chart=ChartShape.BAR, source="S&P"),
    _fred("HOUSING_STARTS", "Housing Starts", _C.HOUSING_MARKET,
          "Thousands of Units (SAAR)", _F.MONTHLY, "HOUST", chart=ChartShape.AREA,
          source="Census"),
    _fred("MORTGAGE_RATE", "30-Year Fixed Mortgage Rate", _C.HOUSING_MARKET, "%",
          _F.WEEKLY, "MORTGAGE30US", source="Freddie Mac"),
    # International Trade
    _fred("TRADE_BALANCE", "Balance of Trade (Goods & Services)", _C.INTERNATIONAL_TRADE,
          "Billions of Dollars", _F.MONTHLY, "BOPGSTB", chart=ChartShape.BAR, source="BEA"),
    _fred("CURRENT_ACCOUNT", "Current Account Balance", _C.INTERNATIONAL_TRADE,
          "Billions of Dollars", _F.QUARTERLY, "BOPBCA", chart=ChartShape.BAR, source="BEA"),
    # Financial Conditions & Markets
    _fred("FEDFUNDS", "Federal Funds Effective Rate", _C.FINANCIAL_CONDITIONS, "%",
          _F.MONTHLY, "FEDFUNDS", source="FRB",
          notes="Monthly average of daily effective federal funds rate."),
    _fred("SP500", "S&P 500 Index", _C.FINANCIAL_CONDITIONS, "Index Value", _F.DAILY,
          "SP500", source="S&P Dow Jones Indices"),
    _fred("US10Y", "US 10-Year Treasury Yield", _C.FINANCIAL_CONDITIONS, "%", _F.DAILY,
          "DGS10", source="U.S. Treasury"),
    _fred("VIX", "Volatility Index (VIX)", _C.FINANCIAL_CONDITIONS, "Index", _F.DAILY,
          "VIXCLS", source="CBOE"),
    _fred("M2_YOY_PCT", "M2 Money Stock (YoY %)", _C.FINANCIAL_CONDITIONS, "% Change YoY",
          _F.MONTHLY, "M2SL", calculation=_K.YOY_PERCENT, chart=ChartShape.BAR,
          source="FRB", notes="Calculated from M2SL level data."),
    _fred("USD_EUR", "USD/EUR Exchange Rate", _C.FINANCIAL_CONDITIONS, "EUR per USD",
          _F.DAILY, "DEXUSEU", source="FRB"),
)


class IndicatorCatalog:
    """Read-only lookup table of indicator descriptors keyed by id."""

    def __init__(self, indicators: Iterable[IndicatorDescriptor] = DEFAULT_INDICATORS) -> None:
        entries: dict[str, IndicatorDescriptor] = {}
        for indicator in indicators:
            if indicator.id in entries:
                raise ValueError(f"Duplicate indicator id in catalog: {indicator.id}")
            entries[indicator.id] = indicator
        self._entries: Mapping[str, IndicatorDescriptor] = MappingProxyType(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[IndicatorDescriptor]:
        return iter(self._entries.values())

    def __contains__(self, indicator_id: object) -> bool:
        return indicator_id in self._entries

    def find(self, indicator_id: str) -> IndicatorDescriptor | None:
        return self._entries.get(indicator_id)

    def get(self, indicator_id: str) -> IndicatorDescriptor:
        """Return the descriptor for ``indicator_id``.

        Raises:
            IndicatorNotFoundError: If the id is not in the catalog
        """
        indicator = self._entries.get(indicator_id)
        if indicator is None:
            raise IndicatorNotFoundError(indicator_id)
        return indicator

    def by_category(self, category: IndicatorCategory) -> list[IndicatorDescriptor]:
        return [i for i in self._entries.values() if i.category is category]

    def ids(self) -> list[str]:
        return list(self._entries)
