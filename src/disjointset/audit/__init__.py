"""Structured JSONL event logging for disjointset runs.

Main Components
---------------
- AuditLogger: JSONL event logger
- LogEvent: event envelope
- generate_run_id: run identifier factory
"""

from disjointset.audit.helpers import generate_run_id
from disjointset.audit.logger import AuditLogger
from disjointset.audit.models import LogEvent

__all__ = [
    "AuditLogger",
    "LogEvent",
    "generate_run_id",
]
