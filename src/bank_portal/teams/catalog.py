"""Fixed team reference data: the six browsable teams plus the generic fallback."""

from typing import Optional

from bank_portal.models.team import TeamOption

FUND_FINANCE = TeamOption(
    id="fund-finance",
    name="Fund Finance Solutions",
    description=(
        "Specialized in private equity fund financing, subscription lines of credit, "
        "and fund-level debt solutions."
    ),
    specialties=["Subscription Lines of Credit", "Fund-Level Financing", "Private Equity Support"],
    confidence=95,
)

CASH_MANAGEMENT = TeamOption(
    id="cash-management",
    name="Cash Management & Treasury",
    description="Comprehensive cash management solutions, liquidity optimization, and treasury services.",
    specialties=["Liquidity Management", "Cash Flow Optimization", "Treasury Services"],
    confidence=88,
)

MA_FINANCE = TeamOption(
    id="m&a-finance",
    name="M&A Finance",
    description="Financing solutions for mergers, acquisitions, and leveraged buyouts.",
    specialties=["Acquisition Financing", "Leveraged Buyouts", "M&A Advisory"],
    confidence=73,
)

REAL_ESTATE = TeamOption(
    id="real-estate",
    name="Real Estate Finance",
    description="Real estate financing, REIT support, and property investment solutions.",
    specialties=["Real Estate Financing", "REIT Support", "Property Investment"],
    confidence=70,
)

# Browse-only: no keyword rule produces these two
CAPITAL_MARKETS = TeamOption(
    id="capital-markets",
    name="Capital Markets",
    description="Debt capital markets, syndicated loans, and structured finance solutions.",
    specialties=["Debt Capital Markets", "Syndicated Loans", "Structured Finance"],
    confidence=68,
)

TRADE_FINANCE = TeamOption(
    id="trade-finance",
    name="Trade Finance",
    description="International trade financing, letters of credit, and supply chain solutions.",
    specialties=["Trade Finance", "Letters of Credit", "Supply Chain Finance"],
    confidence=64,
)

GENERAL_BANKING = TeamOption(
    id="general-banking",
    name="General Banking Solutions",
    description="Comprehensive banking services for various business needs.",
    specialties=["General Banking", "Business Services", "Financial Solutions"],
    confidence=68,
)

_CATALOG: tuple[TeamOption, ...] = (
    FUND_FINANCE,
    CASH_MANAGEMENT,
    MA_FINANCE,
    REAL_ESTATE,
    CAPITAL_MARKETS,
    TRADE_FINANCE,
)


def all_teams() -> list[TeamOption]:
    """The full browse catalog, in display order. Excludes the generic fallback."""
    return list(_CATALOG)


def find_team(team_id: str) -> Optional[TeamOption]:
    """Look up a team by id in the catalog or the fallback; None if unknown."""
    wanted = team_id.strip().lower()
    for team in (*_CATALOG, GENERAL_BANKING):
        if team.id == wanted:
            return team
    return None
