"""Thread Safety Example - Sharing a TemplateFormatter across threads.

Thread Safety:
    TemplateFormatter is immutable after construction. Each format() call
    builds its own resolution cursor, so concurrent calls never observe each
    other's state and need no locks.

Demonstrates:
1. One shared formatter, many threads
2. Per-thread formatters for different locales

Python 3.11+.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from fmtengine import TemplateFormatter


def example_1_shared_formatter() -> None:
    """Example 1: Share one formatter between worker threads."""
    print("=" * 60)
    print("Example 1: Shared Formatter")
    print("=" * 60)

    formatter = TemplateFormatter("en_US")

    def worker(thread_id: int) -> str:
        return formatter.format(
            "[Thread-{:02d}] {} {:>8,.1f}", [thread_id, "total", thread_id * 1000.5]
        )

    with ThreadPoolExecutor(max_workers=4) as pool:
        for line in pool.map(worker, range(8)):
            print(f"  {line}")


def example_2_locale_per_thread() -> None:
    """Example 2: One formatter per locale, used concurrently."""
    print("\n" + "=" * 60)
    print("Example 2: Formatter per Locale")
    print("=" * 60)

    locales = ["en_US", "de_DE", "fr_FR", "hi_IN"]

    def worker(code: str) -> str:
        return TemplateFormatter(code).format("{:<6} {:>14,n}", [code, 123456789])

    with ThreadPoolExecutor(max_workers=len(locales)) as pool:
        for line in pool.map(worker, locales):
            print(f"  {line}")


if __name__ == "__main__":
    example_1_shared_formatter()
    example_2_locale_per_thread()
    print("\n[SUCCESS] Thread safety examples completed.")
