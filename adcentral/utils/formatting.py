"""
Display formatting for currency and percentage values
"""
from datetime import date
from typing import Iterable, Optional

from adcentral.core.config import settings
from adcentral.models.metrics_schema import MetricsResult, MetricsDisplay

NOT_AVAILABLE = "N/A"


def format_currency(value: Optional[float], symbol: Optional[str] = None) -> str:
    """Format a value as Brazilian currency, e.g. 'R$ 1.234,56'"""
    if value is None:
        return NOT_AVAILABLE
    symbol = settings.CURRENCY_SYMBOL if symbol is None else symbol
    sign = "-" if value < 0 else ""
    # 1,234.56 -> 1.234,56
    digits = f"{abs(value):,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}{symbol} {digits}"


def format_percentage(value: Optional[float]) -> str:
    if value is None:
        return NOT_AVAILABLE
    return f"{value:.2f}%"


def format_metrics(result: MetricsResult) -> MetricsDisplay:
    """Render a MetricsResult for presentation; an undefined CAC shows as N/A"""
    return MetricsDisplay(
        sales=str(result.units_sold),
        revenue=format_currency(result.revenue),
        roi=format_percentage(result.roi_percent),
        cac=format_currency(result.cost_per_acquisition),
        breakeven=f"{result.breakeven_units_rounded} sales",
    )


def format_date(value: Optional[date]) -> str:
    """Brazilian day-first date, e.g. '31/03/2025'"""
    if value is None:
        return NOT_AVAILABLE
    return value.strftime("%d/%m/%Y")


def _text(value: Optional[str]) -> str:
    return value if value else NOT_AVAILABLE


def format_campaign_export(
    name: str,
    client_name: Optional[str],
    objective: Optional[str],
    budget: Optional[float],
    audience: Optional[str],
    platforms: Iterable[str],
    start_date: Optional[date],
    end_date: Optional[date],
    status: str,
    notes: Optional[str],
) -> str:
    """Plain-text campaign sheet handed to clients, labels in Portuguese"""
    lines = [
        f"Campanha: {name}",
        f"Cliente: {_text(client_name)}",
        f"Objetivo: {_text(objective)}",
        f"Orçamento: {format_currency(budget)}",
        f"Público: {_text(audience)}",
        f"Plataformas: {_text(', '.join(platforms))}",
        f"Data de Início: {format_date(start_date)}",
        f"Data de Fim: {format_date(end_date)}",
        f"Status: {status.upper()}",
        f"Observações: {_text(notes)}",
    ]
    return "\n".join(lines) + "\n"
