"""
Tiered scheduler package.

Simulates a three-tier static-priority scheduler: processes are admitted to a
high, medium or low queue by priority, each queue gets one quantum-bounded
pass per run, and completed processes are reported with their waiting and
turnaround times.
"""

from .engine import Scheduler, SchedulingPolicy
from .models import Process, Result

__all__ = ["Process", "Result", "Scheduler", "SchedulingPolicy", "cli"]
