#!/usr/bin/env python3
"""
Presence Interval Lifecycle Demo

Walks through the interval lifecycle:
- Empty state
- Valid and rejected entries
- Entry → exit
- Invalid transitions
- Full cycle back to empty
- Immutability of update()

Run with: PYTHONPATH=src python3 examples/lifecycle-demo.py
"""

import sys
sys.path.insert(0, "src")

import logging
from datetime import datetime, timedelta, UTC

from presence_interval import (
    SENTINEL,
    OccupancyStatus,
    PresenceInterval,
    Result,
)


def header(title: str, **inputs):
    print("\n" + "=" * 70)
    print(title)
    print("=" * 70)
    if inputs:
        print("Inputs:")
        for label, value in inputs.items():
            if isinstance(value, datetime):
                tz = value.tzname() or "naive"
                print(f"   {label}: {value:%Y-%m-%d %H:%M:%S.%f} ({tz})")
            else:
                print(f"   {label}: {value}")


def show(interval: PresenceInterval):
    print(f"\n   📍 {interval}")
    print(f"      Status: {interval.status.name}")
    print(f"      Entry:  {_fmt(interval.entered_at)}")
    print(f"      Exit:   {_fmt(interval.exited_at)}")
    if interval.status is OccupancyStatus.COMPLETED:
        print(f"      Duration: {interval.duration}")


def show_result(result: Result):
    if result:
        show(result.value)
    else:
        print(f"   ⚠️  Rejected [{result.code.value}]: {result.error.message}")


def _fmt(moment: datetime) -> str:
    return "N/A" if moment == SENTINEL else f"{moment:%Y-%m-%d %H:%M:%S} UTC"


def demo_empty_state():
    header("1. EMPTY STATE")
    empty = PresenceInterval.empty()
    show(empty)
    print(f"   Active: {empty.is_active()}")
    print(f"   Empty:  {empty.is_empty}")


def demo_valid_entry():
    entered_at = datetime.now(UTC) - timedelta(seconds=2)
    header(
        "2. VALID ENTRY",
        entered_at=entered_at,
        exited_at=SENTINEL,
        status=OccupancyStatus.OCCUPIED.name,
    )
    result = PresenceInterval.create(entered_at, SENTINEL, OccupancyStatus.OCCUPIED)
    show_result(result)
    if result:
        print(f"   Active: {result.value.is_active()}")


def demo_rejected_entry():
    local_time = datetime.now()  # Naive local time
    header("3. REJECTED ENTRY (not UTC)", entered_at=local_time, exited_at=SENTINEL)
    show_result(PresenceInterval.create(local_time, SENTINEL, OccupancyStatus.OCCUPIED))


def demo_entry_to_exit():
    entered_at = datetime.now(UTC) - timedelta(seconds=4)
    exited_at = datetime.now(UTC)
    header("4. ENTRY → EXIT", entered_at=entered_at, exited_at=exited_at)

    result = (
        PresenceInterval.empty()
        .transition_to(OccupancyStatus.OCCUPIED, entered_at)
        .then(lambda occupied: occupied.transition_to(OccupancyStatus.COMPLETED, exited_at))
    )
    show_result(result)


def demo_invalid_transitions():
    entered_at = datetime.now(UTC) - timedelta(seconds=3)
    early_exit = datetime.now(UTC) - timedelta(hours=1)
    header("5. INVALID TRANSITIONS", entered_at=entered_at, exit_attempt=early_exit)

    occupied = PresenceInterval.create(
        entered_at, SENTINEL, OccupancyStatus.OCCUPIED
    ).unwrap()

    print("\nAction: OCCUPIED → UNOCCUPIED")
    show_result(occupied.transition_to(OccupancyStatus.UNOCCUPIED, datetime.now(UTC)))

    print(f"\nAction: exit at {early_exit:%H:%M:%S} (before entry)")
    show_result(occupied.transition_to(OccupancyStatus.COMPLETED, early_exit))


def demo_complete_lifecycle():
    header("6. COMPLETE LIFECYCLE", initial_status=OccupancyStatus.UNOCCUPIED.name)
    state = PresenceInterval.empty()

    steps = [
        (OccupancyStatus.OCCUPIED, datetime.now(UTC) - timedelta(seconds=4)),
        (OccupancyStatus.COMPLETED, datetime.now(UTC)),
        (OccupancyStatus.UNOCCUPIED, SENTINEL),
    ]
    for new_status, timestamp in steps:
        print(f"\n🔄 {state.status.name} → {new_status.name} ({_fmt(timestamp)})")
        result = state.transition_to(new_status, timestamp)
        show_result(result)
        if not result:
            return
        state = result.value

    print(f"\n   Back to empty: {state.is_empty}")


def demo_immutability():
    original_entry = datetime.now(UTC) - timedelta(seconds=4)
    new_entry = datetime.now(UTC) - timedelta(seconds=2)
    exited_at = datetime.now(UTC)
    header(
        "7. IMMUTABILITY",
        original_entry=original_entry,
        updated_entry=new_entry,
        exited_at=exited_at,
    )

    original = PresenceInterval.empty().transition_to(
        OccupancyStatus.OCCUPIED, original_entry
    ).unwrap()
    updated = original.update(new_entry, exited_at, OccupancyStatus.COMPLETED)

    print("\nOriginal:")
    show(original)
    print("\nUpdated:")
    show_result(updated)


def main():
    logging.basicConfig(level=logging.INFO, format="%(name)s - %(levelname)s - %(message)s")

    print("=" * 70)
    print("Presence Interval - Lifecycle Demo")
    print("=" * 70)

    demo_empty_state()
    demo_valid_entry()
    demo_rejected_entry()
    demo_entry_to_exit()
    demo_invalid_transitions()
    demo_complete_lifecycle()
    demo_immutability()

    print("\n" + "=" * 70)
    print("DEMO COMPLETE")
    print("=" * 70)
    print("\n💡 Key Design:")
    print("   - Intervals are frozen; every change yields a new interval")
    print("   - Rejections are returned as values with a stable code")
    print("   - The current instant can be injected (now=...)")


if __name__ == "__main__":
    main()
