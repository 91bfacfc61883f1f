#!/usr/bin/env python3
"""
Quick example demonstrating presence-interval basic usage.

Run with: PYTHONPATH=src python3 example.py
"""

from datetime import datetime, timedelta, UTC

from presence_interval import OccupancyStatus, PresenceInterval

print("=" * 60)
print("presence-interval Example")
print("=" * 60)

# Pin "now" so the example is reproducible
now = datetime(2026, 1, 15, 9, 0, tzinfo=UTC)

# 1. Start from the canonical empty interval
print("\n1. Empty interval...")
interval = PresenceInterval.empty()
print(f"   ✓ {interval} (empty={interval.is_empty})")

# 2. Record an entry
print("\n2. Recording entry...")
result = interval.transition_to(OccupancyStatus.OCCUPIED, now, now=now)
interval = result.unwrap()
print(f"   ✓ {interval} (active={interval.is_active(now)})")

# 3. Record an exit
print("\n3. Recording exit...")
result = interval.transition_to(OccupancyStatus.COMPLETED, now + timedelta(hours=2), now=now)
interval = result.unwrap()
print(f"   ✓ {interval}")
print(f"   ✓ Summary: {interval.to_dict()}")

# 4. A transition outside the lifecycle is rejected, not raised
print("\n4. Attempting COMPLETED → OCCUPIED...")
rejected = interval.transition_to(OccupancyStatus.OCCUPIED, now, now=now)
print(f"   ✓ Rejected: {rejected.code.value} ({rejected.error.message})")

print("\n" + "=" * 60)
print("Example complete!")
print("=" * 60)
