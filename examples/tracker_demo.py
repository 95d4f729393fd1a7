#!/usr/bin/env python3
"""
Tracker Demo - Zenith Daily Wellness Trackers

Logs a week of water, sleep, weight, meals and moods into an in-memory store
and prints the dashboard summary and sleep chart.

Run: python examples/tracker_demo.py
"""

from datetime import date, timedelta

from zenith_app.app import WellnessApp
from zenith_app.config.defaults import get_default_config
from zenith_app.errors import UserInputError
from zenith_app.logging.config import configure_logging
from zenith_app.persistence import InMemoryStore
from zenith_app.sequence import ManualTickSource

SLEEP_HOURS = [7.5, 6.0, 8.0, 5.5, 7.0, 9.0, 7.5]
MOODS = ["happy", "neutral", "calm", "anxious", "happy", "calm", "happy"]


def main() -> None:
    configure_logging(level="WARNING")
    end = date(2024, 3, 10)

    with WellnessApp(config=get_default_config(), store=InMemoryStore(),
                     tick_source=ManualTickSource()) as app:
        for offset, (hours, mood) in enumerate(zip(SLEEP_HOURS, MOODS)):
            day = end - timedelta(days=6 - offset)
            app.sleep.log(day, hours)
            app.moods.log_mood(mood, day)
            app.weight.log(day, 82.0 - offset * 0.3)

        app.weight.set_height(178)
        app.meals.log("Porridge", 320, end)
        app.meals.log("Chicken salad", 540, end)
        for cup in (250, 500, 500):
            app.water.add(cup)

        app.journal.add_entry(end, "Slept well and had a productive morning.", "productive, relaxed")

        print("📊 DAILY SUMMARY")
        print("=" * 50)
        for key, value in app.daily_summary(end).items():
            print(f"  {key:<20} {value}")

        print("\n😴 SLEEP (last 7 days)")
        print("=" * 50)
        for point in app.sleep.chart(end):
            print(f"  {point.label:<7} {'█' * int(point.hours * 2)} {point.hours}h")

        print("\n📅 MOOD CALENDAR")
        print("=" * 50)
        for color, days in app.moods.calendar_modifiers().items():
            print(f"  {color:<7} {', '.join(days)}")

        print("\n🚫 REJECTED INPUT")
        print("=" * 50)
        for action in (lambda: app.sleep.log(end, 30),
                       lambda: app.meals.log("", 100, end),
                       lambda: app.journal.add_entry(end, "short")):
            try:
                action()
            except UserInputError as e:
                print(f"  {e.title}: {e.user_message}")


if __name__ == "__main__":
    main()
