#!/usr/bin/env python3
"""
Routine Demo - Zenith Guided Sequence Timer

This script demonstrates the guided sequence timer behind the stretch,
fitness and breathing pages. It shows how to:
- Build a routine on an in-memory store
- Drive the countdown with a manual tick source
- Pause, resume and skip
- Edit the list while the timer is running

Run: python examples/routine_demo.py
"""

from zenith_app.config.defaults import SequenceParams
from zenith_app.logging.config import configure_logging
from zenith_app.persistence import InMemoryStore
from zenith_app.routines import BreathingSession, FitnessChecklist, StretchRoutine
from zenith_app.sequence import ManualTickSource
from zenith_app.utils.time import format_clock


def show(routine: StretchRoutine, label: str) -> None:
    view = routine.display()
    print(f"  [{label:>12}] {view.phase.value:<13} "
          f"{routine.status_text():<32} {format_clock(view.seconds_remaining)}")


def demo_stretch(store: InMemoryStore, ticks: ManualTickSource) -> None:
    print("🧘 STRETCH ROUTINE")
    print("=" * 60)

    routine = StretchRoutine(store, SequenceParams(transition_duration=3, min_item_duration=5,
                                                   default_item_duration=30), ticks)
    for item in list(routine.items)[2:]:
        routine.remove_item(item.id)
    print(f"  Items: {[f'{item.name} ({item.duration_seconds}s)' for item in routine.items]}")
    print(f"  Total: {format_clock(routine.total_duration())}")

    routine.start()
    show(routine, "start")

    ticks.advance(30)
    show(routine, "30 ticks")

    routine.pause()
    ticks.advance(10)
    show(routine, "paused +10")

    routine.resume()
    ticks.advance(3)
    show(routine, "resumed +3")

    routine.add_item("Calf Stretch", 20)
    show(routine, "item added")

    routine.skip()
    show(routine, "skipped")

    ticks.advance(routine.total_duration())
    show(routine, "finished")
    print(f"  Notice: {routine.last_notice}")
    routine.close()


def demo_fitness(store: InMemoryStore, ticks: ManualTickSource) -> None:
    print("\n🏋️  FITNESS CHECKLIST")
    print("=" * 60)

    with FitnessChecklist(store, tick_source=ticks) as checklist:
        checklist.start()
        ticks.advance(300)
        checklist.skip()
        print(f"  {checklist.summary_text()}")
        for item in checklist.items:
            mark = "✓" if checklist.is_completed(item.id) else " "
            print(f"    [{mark}] {item.name}")


def demo_breathing(ticks: ManualTickSource) -> None:
    print("\n🌬️  BREATHING SESSION")
    print("=" * 60)

    with BreathingSession(tick_source=ticks) as session:
        print(f"  {session.status_label()} {session.description()}")
        session.start()
        for _ in range(3):
            ticks.advance(4)
            print(f"  {session.status_label():<10} {session.description()}")
        ticks.advance(session.time_left())
        print(f"  {session.status_label()}")


def main() -> None:
    configure_logging(level="WARNING")

    store = InMemoryStore()
    ticks = ManualTickSource()

    demo_stretch(store, ticks)
    demo_fitness(store, ticks)
    demo_breathing(ticks)

    print(f"\n✅ Live tick handles after demo: {ticks.active_count}")


if __name__ == "__main__":
    main()
