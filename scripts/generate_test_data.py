#!/usr/bin/env python3
"""
Generate realistic ledger data for the last 3 months.
Simulates a user's salary, rent and day-to-day spending.

Usage: from project root (after `pip install -e .`):
  python scripts/generate_test_data.py you@example.com
"""

import asyncio
import random
import sys
from datetime import date, timedelta
from decimal import Decimal

from cashbook.app_context import AppContext
from cashbook.config.logging_config import setup_logging
from cashbook.config.settings import get_settings
from cashbook.domain.models import TransactionDraft, TransactionType

# (category, low, high, chance per day)
DAILY_SPENDING = [
    ("food", 8, 45, 0.6),
    ("transport", 2, 15, 0.4),
    ("entertainment", 10, 60, 0.08),
    ("shopping", 15, 120, 0.06),
    ("health", 10, 80, 0.03),
]


def build_drafts(today: date, seed: int = 7) -> list[TransactionDraft]:
    """Build 90 days of drafts, oldest first."""
    rng = random.Random(seed)
    start = today - timedelta(days=90)
    drafts: list[TransactionDraft] = []

    day = start
    while day <= today:
        if day.day == 1:
            drafts.append(TransactionDraft(
                type=TransactionType.INCOME,
                amount=Decimal("4200.00"),
                category="salary",
                date=day,
                description="Monthly salary",
            ))
            drafts.append(TransactionDraft(
                type=TransactionType.EXPENSE,
                amount=Decimal("1450.00"),
                category="rent",
                date=day,
            ))
        if day.day == 15 and rng.random() < 0.5:
            drafts.append(TransactionDraft(
                type=TransactionType.INCOME,
                amount=Decimal(str(rng.randint(150, 600))),
                category="freelance",
                date=day,
            ))
        for category, low, high, chance in DAILY_SPENDING:
            if rng.random() < chance:
                amount = Decimal(str(rng.uniform(low, high))).quantize(Decimal("0.01"))
                drafts.append(TransactionDraft(
                    type=TransactionType.EXPENSE,
                    amount=amount,
                    category=category,
                    date=day,
                ))
        day += timedelta(days=1)

    return drafts


async def generate_realistic_data(email: str) -> None:
    """Sign in as ``email`` and add the generated entries."""
    settings = get_settings()
    setup_logging(settings)
    context = AppContext(settings)
    await context.start()
    try:
        await context.auth.sign_in(email)
        drafts = build_drafts(date.today())
        print(f"Adding {len(drafts)} transactions for {email}")
        print("=" * 60)
        for draft in drafts:
            await context.ledger.add(draft)

        snapshot = context.ledger.snapshot()
        print(f"Income:   {snapshot.total_income}")
        print(f"Expenses: {snapshot.total_expenses}")
        print(f"Balance:  {snapshot.balance}")
    finally:
        await context.close()


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print(__doc__)
        sys.exit(1)
    asyncio.run(generate_realistic_data(sys.argv[1]))
