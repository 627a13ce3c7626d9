"""Display surface for dashboards and other consumers."""

from mechamind.dashboard.surface import ChartLimits, KpiReadout, MonitorDashboard

__all__ = ["ChartLimits", "KpiReadout", "MonitorDashboard"]
