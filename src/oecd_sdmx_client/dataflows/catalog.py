"""Curated catalog of OECD dataflows known to answer on the SDMX data endpoint.

The OECD service has no usable full-catalog listing, so lookups resolve
against this static table. ``full_id`` is the ``DSD_ID@DF_ID`` pair and
``agency`` the owning authority used in the data path.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol


@dataclass(slots=True, frozen=True)
class DataflowReference:
    id: str
    full_id: str
    agency: str
    version: str
    name: str
    description: str
    category: str

    def to_summary(self) -> dict[str, str]:
        return {
            "id": self.id,
            "version": self.version,
            "name": self.name,
            "description": self.description,
            "agencyID": self.agency,
        }


class DataflowCatalog(Protocol):
    def lookup(self, dataflow_id: str) -> DataflowReference | None: ...
    def search(self, text: str) -> tuple[DataflowReference, ...]: ...
    def by_category(self, category: str) -> tuple[DataflowReference, ...]: ...
    def all(self) -> tuple[DataflowReference, ...]: ...


def _df(
    id: str,
    full_id: str,
    agency: str,
    version: str,
    name: str,
    description: str,
    category: str,
) -> DataflowReference:
    return DataflowReference(id, full_id, agency, version, name, description, category)


KNOWN_DATAFLOWS: tuple[DataflowReference, ...] = (
    # Economy
    _df(
        "QNA", "DSD_NAMAIN1@DF_QNA", "OECD.SDD.NAD", "1.0",
        "Quarterly National Accounts",
        "GDP and main aggregates - quarterly frequency. Includes GDP, consumption, "
        "investment, government spending by country and quarter.",
        "ECO",
    ),
    _df(
        "MEI", "DSD_STES@DF_CLI", "OECD.SDD.STES", "1.0",
        "Main Economic Indicators - Composite Leading Indicators",
        "Composite Leading Indicators (CLI) designed to provide early signals of "
        "turning points in business cycles. Monthly frequency.",
        "ECO",
    ),
    _df(
        "PDB_LV", "DSD_PDB@DF_PDB_LV", "OECD.SDD.TPS", "1.0",
        "Productivity - GDP per Hour Worked",
        "Labour productivity levels - GDP per hour worked, indexed and in USD.",
        "ECO",
    ),
    # Health
    _df(
        "HEALTH_STAT", "DSD_HEALTH_STAT@DF_PHS", "OECD.ELS.HD", "1.0",
        "Health Statistics - Perceived Health Status",
        "Percentage of population aged 15+ reporting good/very good health status, "
        "by age and gender.",
        "HEA",
    ),
    _df(
        "SHA", "DSD_SHA@DF_SHA", "OECD.ELS.HD", "1.0",
        "System of Health Accounts",
        "Health expenditure data by financing scheme, provider, and function. "
        "Based on SHA 2011 framework.",
        "HEA",
    ),
    _df(
        "HEALTH_REAC", "DSD_HEALTH_REAC@DF_ACUTE_CARE", "OECD.ELS.HD", "1.0",
        "Health Resources - Acute Care Beds",
        "Hospital beds per 1,000 population for acute care.",
        "HEA",
    ),
    # Education
    _df(
        "EAG_FIN", "DSD_EAG_UOE_FIN@DF_UOE_INDIC_FIN_PERSTUD", "OECD.EDU.IMEP", "3.0",
        "Education at a Glance - Financial Indicators per Student",
        "Education spending per student by education level. Part of "
        "UNESCO-UIS/OECD/EUROSTAT (UOE) data collection.",
        "EDU",
    ),
    _df(
        "EAG_NEAC", "DSD_EAG_NEAC@DF_NEAC", "OECD.EDU.IMEP", "1.0",
        "Education at a Glance - Educational Attainment",
        "Population with tertiary education by age group and sex.",
        "EDU",
    ),
    _df(
        "EAG_GRAD_ENTR_RATE", "DSD_EAG_GRAD_ENTR@DF_GRAD_ENTR_RATE", "OECD.EDU.IMEP", "1.0",
        "Education at a Glance - Graduation and Entry Rates",
        "Graduation rates and new entrants by education level.",
        "EDU",
    ),
    # Employment
    _df(
        "AVD_DUR", "DSD_DUR@DF_AVD_DUR", "OECD.ELS.SAE", "1.0",
        "Unemployment by Duration - Average Duration",
        "Average duration of unemployment in months by country and demographic "
        "characteristics.",
        "JOB",
    ),
    _df(
        "LFS_SEXAGE_I_R", "DSD_LFS@DF_IALFS_UNE_M", "OECD.SDD.LFS", "1.0",
        "Labour Force Statistics - Unemployment by Sex and Age",
        "Monthly unemployment rates by sex and age group.",
        "JOB",
    ),
    _df(
        "ANHRS", "DSD_ANHRS@DF_ANHRS", "OECD.SDD.LFS", "1.0",
        "Average Annual Hours Worked",
        "Average hours actually worked per worker per year.",
        "JOB",
    ),
    # Trade
    _df(
        "TIS", "DSD_BOP@DF_TIS", "OECD.SDD.TPS", "1.0",
        "Trade in Services",
        "International trade in services by country and service category, based on "
        "Balance of Payments.",
        "TRD",
    ),
    _df(
        "TISP", "DSD_BTS@DF_BTS_TISP", "OECD.SDD.TPS", "1.0",
        "Trade in Services by Partner Country",
        "Bilateral trade in services by service category and partner country.",
        "TRD",
    ),
    _df(
        "TIVA", "DSD_TIVA@DF_TIVA_2021", "OECD.SDD.TPS", "1.0",
        "Trade in Value Added 2021",
        "Value added in gross exports by source country and industry.",
        "TRD",
    ),
    # Finance and government
    _df(
        "FDI", "DSD_FDI@DF_FDI_CTRY_IND_SUMM", "OECD.DAF.INV", "1.0",
        "Foreign Direct Investment - Country and Industry Summary",
        "FDI flows and stocks by country and industry. Includes inward and outward "
        "FDI positions.",
        "FIN",
    ),
    _df(
        "GOV_2023", "DSD_GOV@DF_GOV_2023", "OECD.GOV.GIP", "1.0",
        "Government at a Glance 2023",
        "Government indicators including public finance, budgeting, human resources "
        "management, regulatory governance, and open government.",
        "GOV",
    ),
    # Environment and climate
    _df(
        "DF_LAND_TEMP", "DSD_FUA_CLIM@DF_LAND_TEMP", "OECD.CFE.EDS", "1.2",
        "Land surface temperature - Cities and FUAs",
        "Land surface temperature indicators in functional urban areas and cities",
        "ENV",
    ),
    _df(
        "DF_CLIM_PROJ", "DSD_FUA_CLIM@DF_CLIM_PROJ", "OECD.CFE.EDS", "1.4",
        "Climate projections by scenario, 2030-2060 - Cities and FUAs",
        "Climate projections for cities based on different scenarios (SSP)",
        "ENV",
    ),
    _df(
        "DF_COASTAL_FLOOD", "DSD_FUA_CLIM@DF_COASTAL_FLOOD", "OECD.CFE.EDS", "1.1",
        "Coastal flooding - Cities and FUAs",
        "Population and built-up exposure to coastal floods",
        "ENV",
    ),
    _df(
        "DF_DROUGHT", "DSD_FUA_CLIM@DF_DROUGHT", "OECD.CFE.EDS", "1.2",
        "Drought - Cities and FUAs",
        "Soil moisture anomaly estimates in functional urban areas",
        "ENV",
    ),
    _df(
        "DF_FIRES", "DSD_FUA_CLIM@DF_FIRES", "OECD.CFE.EDS", "1.1",
        "Wildfires - Cities and FUAs",
        "Population and land exposure to wildfires",
        "ENV",
    ),
    _df(
        "DF_HEAT_STRESS", "DSD_FUA_CLIM@DF_HEAT_STRESS", "OECD.CFE.EDS", "1.1",
        "Heat stress - Cities and FUAs",
        "Population exposure to heat stress (UTCI index)",
        "ENV",
    ),
    _df(
        "DF_PRECIP", "DSD_FUA_CLIM@DF_PRECIP", "OECD.CFE.EDS", "1.1",
        "Precipitation - FUAs",
        "Total precipitation and extreme precipitation days",
        "ENV",
    ),
    _df(
        "DF_RIVER_FLOOD", "DSD_FUA_CLIM@DF_RIVER_FLOOD", "OECD.CFE.EDS", "1.1",
        "River flooding - Cities and FUAs",
        "Population and built-up exposure to river floods",
        "ENV",
    ),
    _df(
        "GREEN_GROWTH", "DSD_GG@DF_GREEN_GROWTH", "OECD.ENV.EPI", "1.0",
        "Green Growth Indicators",
        "Environmental and economic indicators for green growth monitoring. Includes "
        "carbon productivity, energy intensity, and renewable energy deployment.",
        "ENV",
    ),
    # Energy and agriculture
    _df(
        "NAT_RES", "DSD_NAT_RES@DF_NAT_RES", "OECD.SDD.NAD.SEEA", "1.0",
        "Natural Resources - Mineral and Energy",
        "Natural resource accounts for mineral and energy resources. Part of System "
        "of Environmental-Economic Accounting (SEEA).",
        "NRG",
    ),
    _df(
        "AGR_OUTLOOK", "DSD_AGR@DF_OUTLOOK_2023_2032", "OECD.TAD.ATM", "1.0",
        "Agricultural Outlook 2023-2032",
        "OECD-FAO Agricultural Outlook projections for agricultural production, "
        "consumption, trade, and prices.",
        "AGR",
    ),
    # Social
    _df(
        "IDD", "DSD_WISE_IDD@DF_IDD", "OECD.WISE.INE", "1.0",
        "Income Distribution Database",
        "Income distribution statistics including Gini coefficients, income quintiles, "
        "poverty rates, and income inequality measures by country.",
        "SOC",
    ),
    _df(
        "SOCX_AGG", "DSD_SOCX_AGG@DF_SOCX_AGG", "OECD.ELS.SPD", "1.0",
        "Social Expenditure - Aggregated Data",
        "Social spending by country and program area (pensions, healthcare, family "
        "benefits, unemployment, housing).",
        "SOC",
    ),
    _df(
        "INCOME_INEQ", "DSD_REG_SOC@DF_INCOME_INEQ", "OECD.CFE.EDS", "1.0",
        "Income Inequality - Regional Level",
        "Regional income inequality indicators including Gini coefficient and income "
        "ratios at sub-national level.",
        "SOC",
    ),
    # Development
    _df(
        "DAC2A", "DSD_DAC2@DF_DAC2A", "OECD.DCD.FSD", "1.0",
        "Aid (ODA) Disbursements by Country and Region",
        "Official Development Assistance (ODA) disbursements from DAC donors by "
        "recipient country and region.",
        "DEV",
    ),
    _df(
        "DAC3A", "DSD_DAC2@DF_DAC3A", "OECD.DCD.FSD", "1.0",
        "Aid (ODA) Commitments by Country and Region",
        "Official Development Assistance (ODA) commitments from DAC donors by "
        "recipient country and region.",
        "DEV",
    ),
    _df(
        "ODF", "DSD_DAC2@DF_ODF", "OECD.DCD.FSD", "1.0",
        "Other Official Flows (OOF)",
        "Official Development Financing beyond ODA - includes other official flows "
        "to developing countries.",
        "DEV",
    ),
    # Science and technology
    _df(
        "MSTI", "DSD_MSTI@DF_MSTI", "OECD.STI.STP", "1.0",
        "Main Science and Technology Indicators",
        "Key R&D indicators including R&D expenditure, researchers, patents, and "
        "innovation metrics by country and sector.",
        "STI",
    ),
    _df(
        "PAT_DEV", "DSD_PAT_DEV@DF_PAT_DEV", "OECD.ENV.EPI", "1.0",
        "Patents - Technology Development",
        "Patent data for technology development analysis, including "
        "environment-related technologies.",
        "STI",
    ),
    _df(
        "ICT_IND", "DSD_ICT_HH_IND@DF_IND", "OECD.STI.DEP", "1.0",
        "ICT Access and Usage by Individuals",
        "Information and Communication Technology access and usage statistics by "
        "individuals, including internet usage and e-commerce.",
        "STI",
    ),
    # Regional
    _df(
        "REGION_ECONOM", "DSD_REG_DEMO_ECON@DF_GDP_PC", "OECD.CFE.EDS", "1.0",
        "Regional Economy - GDP per Capita",
        "Regional GDP per capita in USD PPP.",
        "REG",
    ),
    _df(
        "REGION_LABOUR", "DSD_REG_DEMO_ECON@DF_UNEMP_REG", "OECD.CFE.EDS", "1.0",
        "Regional Labour Market - Unemployment",
        "Regional unemployment rates at territorial level 2 and 3.",
        "REG",
    ),
    # Housing and migration
    _df(
        "HPI", "DSD_PRICES@DF_HPI", "OECD.SDD.STES", "1.0",
        "House Price Index",
        "Residential property price indices (nominal and real).",
        "HOU",
    ),
    _df(
        "RPPI", "DSD_PRICES@DF_RPPI", "OECD.ECO.MET", "1.0",
        "Real Property Price Indicators",
        "Real house prices and price-to-income/rent ratios.",
        "HOU",
    ),
    _df(
        "MIG", "DSD_MIG@DF_MIG", "OECD.ELS.MIG", "1.0",
        "International Migration Database",
        "International migration flows and stocks by country of origin/destination.",
        "MIG",
    ),
)


class StaticDataflowCatalog:
    """Read-only in-memory catalog."""

    def __init__(self, entries: Iterable[DataflowReference] = KNOWN_DATAFLOWS) -> None:
        self._entries = tuple(entries)
        self._by_id = {entry.id: entry for entry in self._entries}

    def lookup(self, dataflow_id: str) -> DataflowReference | None:
        return self._by_id.get(dataflow_id)

    def search(self, text: str) -> tuple[DataflowReference, ...]:
        needle = text.lower()
        return tuple(
            entry
            for entry in self._entries
            if needle in entry.id.lower()
            or needle in entry.name.lower()
            or needle in entry.description.lower()
        )

    def by_category(self, category: str) -> tuple[DataflowReference, ...]:
        return tuple(entry for entry in self._entries if entry.category == category)

    def all(self) -> tuple[DataflowReference, ...]:
        return self._entries


__all__ = [
    "DataflowReference",
    "DataflowCatalog",
    "KNOWN_DATAFLOWS",
    "StaticDataflowCatalog",
]
