from __future__ import annotations

import os


class Config:
    # Where players can recompute the HMAC from the disclosed key.
    VERIFY_URL = os.environ.get("FAIR_RPS_VERIFY_URL") or "https://www.freeformatter.com/hmac-generator.html"
    # Any format name tabulate accepts.
    TABLE_FORMAT = os.environ.get("FAIR_RPS_TABLE_FORMAT") or "grid"
    LOG_LEVEL = os.environ.get("FAIR_RPS_LOG_LEVEL") or "WARNING"
