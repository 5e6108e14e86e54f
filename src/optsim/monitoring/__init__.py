"""Monitoring exports."""

from optsim.monitoring.audit import AuditLog
from optsim.monitoring.monitor import Monitor
from optsim.monitoring.notifier import LogNotifier, MemoryNotifier, Notifier

__all__ = [
    "AuditLog",
    "LogNotifier",
    "MemoryNotifier",
    "Monitor",
    "Notifier",
]
