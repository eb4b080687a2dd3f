from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

import pandas as pd

from transactions.pagination import as_utc


def format_amount(amount: float, symbol: str = "₹") -> str:
  return f"{symbol}{amount:,.2f}"


def relative_time(date: datetime, now: Optional[datetime] = None, tz: str = "UTC") -> str:
  """'Just now', 'Nh ago', 'Yesterday', or the local calendar date."""
  now = as_utc(now) if now is not None else datetime.now(timezone.utc)
  when = as_utc(date)
  hours = int((now - when).total_seconds() // 3600)
  if hours < 1:
    return "Just now"
  if hours < 24:
    return f"{hours}h ago"
  if hours < 48:
    return "Yesterday"
  return pd.Timestamp(when).tz_convert(tz).strftime("%Y-%m-%d")
