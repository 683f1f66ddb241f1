from __future__ import annotations

import argparse
import random
from datetime import date, timedelta
from typing import List

import lunisolar


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def random_date(rng: random.Random, start: date, end: date) -> date:
    span = (end - start).days
    return start + timedelta(days=rng.randint(0, span))


def parse_calendars(s: str) -> List[str]:
    # "chinese,korean" -> ["chinese", "korean"]
    return [x.strip() for x in s.split(",") if x.strip()]


def roundtrip_test(
    calendar: str,
    N: int,
    start: date,
    end: date,
    seed: int,
    *,
    max_failures: int,
) -> int:
    """
    Gregorian -> lunisolar -> Gregorian through both the ordinal month and the
    traditional (leap-marked) lunar month. Returns the number of failures.
    """
    rng = random.Random(seed)
    failures = 0

    for _ in range(N):
        d0 = random_date(rng, start, end)
        info = lunisolar.day_info(d0, calendar=calendar)
        t = info.date

        back = lunisolar.to_gregorian(t)
        t2 = lunisolar.new(t.year, info.lunar_month, t.day, calendar=calendar)
        if back == d0 and t2 == t:
            continue

        failures += 1
        print("\nFAIL")
        print("calendar:", calendar)
        print("d0:", d0)
        print("date:", t, "lunar month:", info.lunar_month)
        print("back:", back)
        print("new():", t2)
        print("explain:", lunisolar.explain(d0, calendar=calendar))
        if failures >= max_failures:
            return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: gregorian -> lunisolar -> gregorian.")
    p.add_argument("--calendars", type=str, default="chinese,korean,japanese",
                   help="Comma-separated calendar list.")
    p.add_argument("--N", type=int, default=500, help="Trials per calendar.")
    p.add_argument("--start", type=str, default="1645-01-01", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="2200-12-31", help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per calendar.")
    args = p.parse_args(argv)

    calendars = parse_calendars(args.calendars)
    start = parse_date(args.start)
    end = parse_date(args.end)

    if end < start:
        raise SystemExit("--end must be >= --start")

    total_fail = 0
    for cal in calendars:
        print(f"Testing {cal} ...")
        total_fail += roundtrip_test(cal, N=args.N, start=start, end=end, seed=args.seed, max_failures=args.max_failures)

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
