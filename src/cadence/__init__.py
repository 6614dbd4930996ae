"""
cadence – Lightweight recurring-job scheduler for asyncio.

Import path convention::

    from cadence.application.scheduler import Job, JobScheduler, ExecutionMode
    from cadence.config import SchedulerSettings, EnvSettingsLoader
    from cadence.observability.logging import JsonLoggerFactory, get_logger
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
